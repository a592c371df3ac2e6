"""CLI adapter to export, import and update the stored financial data.

Subcommands:

* ``export [PATH]`` writes the JSON document to PATH (stdout by default);
* ``import PATH`` replaces all data after confirmation (``--yes`` skips it);
* ``log-recurring [--month YYYY-MM]`` logs recurring expenses for a month.
"""

import argparse
import sys
from datetime import date
from pathlib import Path

from src.application.ports.document_codec import ImportFormatError
from src.domain.models.actions import LogRecurringExpensesForMonth
from src.domain.services.normalization import (
    format_month_key,
    normalize_month_key,
)
from src.infrastructure.container import build_financial_store
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger


def _month_arg(value: str) -> str:
    try:
        return normalize_month_key(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Invalid month: {value}") from exc


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="finance-data",
        description="Manage the stored personal finance data.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    export_parser = subparsers.add_parser("export", help="Export data as JSON")
    export_parser.add_argument("path", nargs="?", type=Path)

    import_parser = subparsers.add_parser("import", help="Import a JSON file")
    import_parser.add_argument("path", type=Path)
    import_parser.add_argument(
        "--yes",
        action="store_true",
        help="Overwrite existing data without asking",
    )

    log_parser = subparsers.add_parser(
        "log-recurring",
        help="Log recurring expenses for a month",
    )
    log_parser.add_argument(
        "--month",
        type=_month_arg,
        default=None,
        help="Month to log (YYYY-MM), defaults to the current month",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return the process exit code."""
    args = build_parser().parse_args(argv)
    logger = get_app_logger()
    usage_logger = get_usage_logger()
    store = build_financial_store()

    if args.command == "export":
        document = store.export_document()
        if args.path is None:
            print(document)
        else:
            args.path.write_text(document, encoding="utf-8")
            print(f"Exported financial data to {args.path}")
        usage_logger.info("cli export")
        return 0

    if args.command == "import":
        try:
            raw = args.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.error(f"Could not read {args.path}: {exc}")
            print(f"Could not read {args.path}: {exc}", file=sys.stderr)
            return 2
        if not args.yes:
            answer = input(
                "Are you sure? Importing data will overwrite all existing "
                "data. [y/N] "
            )
            if answer.strip().lower() not in ("y", "yes"):
                print("Import cancelled.")
                return 1
        try:
            data = store.import_document(raw)
        except ImportFormatError as exc:
            print(f"Invalid file format: {exc}", file=sys.stderr)
            return 2
        print(
            f"Imported {len(data.expenses)} expenses, {len(data.debts)} "
            f"debts, {len(data.income)} income entries and "
            f"{len(data.assets)} assets."
        )
        usage_logger.info(f"cli import {args.path}")
        return 0

    month = args.month or format_month_key(date.today())
    before = len(store.state.expenses)
    after = len(store.dispatch(LogRecurringExpensesForMonth(month)).expenses)
    logger.info(f"Logged {after - before} recurring expenses for {month}")
    print(f"Logged {after - before} recurring expenses for {month}.")
    usage_logger.info(f"cli log-recurring {month}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
