"""Adapters connecting the reconciliation core to its collaborators."""
