"""Reconciliation core: entities, cache, validation and resource controllers."""
