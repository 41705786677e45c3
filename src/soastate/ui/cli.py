# ruff: noqa: T201

from __future__ import annotations

import argparse
import json
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from soastate.app import build_provider
from soastate.common import configure_logging
from soastate.config import ConfigurationError
from soastate.domain.errors import ReconciliationError, ValidationError
from soastate.domain.model import ResourceType

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from soastate.adapters.engine import ResourceState

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Inspect remote SOA resources")
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log at DEBUG level",
    )
    parser.add_argument(
        "--echo-sql",
        action="store_true",
        help="Log every SQL statement sent to the database",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    resource_types = [member.value for member in ResourceType]

    list_cmd = subparsers.add_parser("list", help="List every live entity of a resource type")
    list_cmd.add_argument("resource_type", choices=resource_types)

    show = subparsers.add_parser("show", help="Show one entity, as an import would see it")
    show.add_argument("resource_type", choices=resource_types)
    show.add_argument("identity", help="Identity string of the entity (its numeric id)")

    return parser.parse_args(list(argv))


def _render(state: ResourceState) -> dict[str, object]:
    return {"id": state.identity, **state.attributes}


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(
        level=logging.DEBUG if parsed_args.verbose else logging.INFO,
        echo_sql=parsed_args.echo_sql,
    )

    try:
        provider = build_provider()
    except ConfigurationError:
        log.exception("Invalid provider configuration")
        sys.exit(2)
    except Exception:
        log.exception("Could not set up the database connection")
        sys.exit(1)

    try:
        handler = provider.handler(parsed_args.resource_type)
        if parsed_args.command == "list":
            payload: object = [_render(state) for state in handler.list_all()]
        else:
            state = handler.import_state(parsed_args.identity)
            if state is None:
                log.error("%s %s does not exist", parsed_args.resource_type, parsed_args.identity)
                sys.exit(1)
            payload = _render(state)
        print(json.dumps(payload, indent=2))
    except ValidationError:
        log.exception("Invalid request")
        sys.exit(2)
    except ReconciliationError:
        log.exception("Remote operation failed")
        sys.exit(1)
    finally:
        provider.close()


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
