from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from pagefactory.app import Operation, run_reconciliation
from pagefactory.config import ConfigurationError, configure_logging
from pagefactory.domain.model import AssociationKind

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from pagefactory.domain.reconciliation import ReconciliationResult

log = logging.getLogger(__name__)

_KIND_BY_CHOICE = {
    "parts": AssociationKind.PART,
    "fields": AssociationKind.FIELD,
}


def _common_options() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--declarations",
        type=str,
        help="TOML file declaring page types (defaults to $PAGEFACTORY_DECLARATIONS)",
    )
    common.add_argument(
        "--page-type",
        type=str,
        help="Restrict the operation to a single page type",
    )
    common.add_argument(
        "--dry-run",
        action="store_true",
        help="Report planned changes without writing to the database",
    )
    common.add_argument(
        "--database-uri",
        type=str,
        help="SQLAlchemy database URI (defaults to $DATABASE_URI or the data dir)",
    )
    common.add_argument(
        "--verbose",
        action="store_true",
        help="Log every planned change",
    )
    common.add_argument(
        "--echo-sql",
        action="store_true",
        help="Log the SQL statements sent to the database",
    )
    return common


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Reconcile persisted page parts, fields and layouts with declarations"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    common = _common_options()

    for command, help_text in (
        (Operation.PRUNE, "Delete parts or fields that are no longer declared"),
        (Operation.SYNC, "Replace parts whose class does not match the declaration"),
        (Operation.UPDATE, "Add declared parts or fields that are missing"),
    ):
        sub = subparsers.add_parser(command.value, help=help_text, parents=[common])
        sub.add_argument(
            "--kind",
            choices=sorted(_KIND_BY_CHOICE),
            default="parts",
            help="Association kind to reconcile (default: %(default)s)",
        )

    subparsers.add_parser(
        Operation.LAYOUTS.value,
        help="Point page types at their declared layouts",
        parents=[common],
    )
    subparsers.add_parser(
        Operation.RECONCILE.value,
        help="Run prune, sync and update for parts and fields, then sync layouts",
        parents=[common],
    )

    return parser.parse_args(list(argv))


def _report(result: ReconciliationResult) -> None:
    prefix = "[dry run] " if result.dry_run else ""
    for change in result.changes:
        log.info("%s%s", prefix, change.describe())
    log.info(
        "%s%s: page_types=%s, created=%s, deleted=%s, assigned=%s, skipped=%s",
        prefix,
        result.operation,
        len(result.page_types),
        result.created,
        result.deleted,
        result.assigned,
        result.skipped,
    )


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)

    configure_logging(
        level=logging.DEBUG if parsed_args.verbose else logging.INFO,
        echo_sql=parsed_args.echo_sql,
    )
    operation = Operation(parsed_args.command)
    kind = _KIND_BY_CHOICE[getattr(parsed_args, "kind", "parts")]

    try:
        result = run_reconciliation(
            operation,
            kind=kind,
            declarations_path=parsed_args.declarations,
            scope=parsed_args.page_type,
            dry_run=parsed_args.dry_run,
            database_uri=parsed_args.database_uri,
        )
    except ConfigurationError:
        log.exception("Configuration error")
        sys.exit(2)
    except Exception:
        log.exception("Fatal error during reconciliation")
        sys.exit(1)

    _report(result)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    """Console script entry point."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
