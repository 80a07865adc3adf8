"""Command-line entrypoint for the district absenteeism lookup.

Loads the district dataset once per invocation and then searches, shows, or
exports a single district, or launches the interactive Textual app.

Usage
-----
::

    absence-lookup search aspen
    absence-lookup show "Aspen Ridge Unified" --chart output/aspen.png
    absence-lookup export "Aspen Ridge Unified"
    absence-lookup tui
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
from pathlib import Path

from rich.console import Console

from absence_lookup.config import (
    LOG_DIR,
    LOG_FILENAME_LOOKUP,
    LOG_FORMAT,
    SEARCH_HINT_TEXT,
)
from absence_lookup.controller import LookupController
from absence_lookup.exceptions import AppError, UserInputError
from absence_lookup.pipeline.district_data import DistrictRecord
from absence_lookup.pipeline.lookup import SearchStatus, find_district
from absence_lookup.pipeline.report import export_district_report, report_filename
from absence_lookup.presenter import (
    MatplotlibChartRenderer,
    Presenter,
    RichTableRenderer,
)
from absence_lookup.settings import LookupSettings

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


def configure_logging(log_level: str = "INFO", enable_file: bool = True) -> None:
    """Route lookup logs to stderr and, when enabled, ``logs/absence_lookup.log``.

    Replaces any handlers already on the root logger. If the log directory
    cannot be used the file handler is left out.
    """
    for h in logging.root.handlers[:]:
        logging.root.removeHandler(h)
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if enable_file:
        try:
            LOG_DIR.mkdir(exist_ok=True)
            handlers.insert(
                0, logging.FileHandler(LOG_DIR / LOG_FILENAME_LOOKUP, mode="a")
            )
        except OSError:
            pass
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Look up school-district chronic absenteeism rates."
    )
    parser.add_argument(
        "--csv",
        dest="csv_source",
        default=None,
        help="Path or URL of the district CSV (default from config/env).",
    )
    parser.add_argument("--log-level", type=str, default="WARNING")
    sub = parser.add_subparsers(dest="command", required=True)

    search = sub.add_parser("search", help="List districts matching a name fragment.")
    search.add_argument("query")

    show = sub.add_parser("show", help="Print the rate table for one district.")
    show.add_argument("name")
    show.add_argument("--chart", type=Path, default=None, help="Save chart PNG here.")

    export = sub.add_parser("export", help="Write an HTML report for one district.")
    export.add_argument("name")
    export.add_argument("--output", type=Path, default=None)

    sub.add_parser("tui", help="Run the interactive terminal app.")
    return parser


def _load(controller: LookupController, console: Console) -> bool:
    asyncio.run(controller.on_ready())
    if controller.status_is_error:
        console.print(controller.status, style="red", markup=False)
        return False
    return True


def _resolve(controller: LookupController, name: str) -> DistrictRecord:
    record = find_district(controller.records, name)
    if record is None:
        raise UserInputError(f"Unknown district: {name}", context={"name": name})
    return record


def cmd_search(controller: LookupController, console: Console, query: str) -> int:
    outcome = controller.on_input(query)
    if outcome.status is SearchStatus.NOT_SHOWN:
        console.print(SEARCH_HINT_TEXT)
        return EXIT_OK
    if outcome.status is SearchStatus.NO_MATCHES:
        console.print(outcome.display_text)
        return EXIT_OK
    for name in outcome.names:
        console.print(name, markup=False, highlight=False)
    return EXIT_OK


def cmd_show(
    controller: LookupController, console: Console, name: str, chart: Path | None
) -> int:
    record = _resolve(controller, name)
    controller.on_result_click(record)
    handle = controller.presenter.chart
    if chart is not None and handle is not None:
        try:
            handle.save(chart)
        except OSError as exc:
            logger.error("Could not save chart to %s: %s", chart, exc)
            console.print(f"Could not save chart to {chart}", style="red", markup=False)
            return EXIT_FAILURE
        console.print(f"Chart written to {chart}")
    return EXIT_OK


def cmd_export(
    controller: LookupController,
    console: Console,
    settings: LookupSettings,
    name: str,
    output: Path | None,
) -> int:
    record = _resolve(controller, name)
    target = output or settings.output_dir / report_filename(record.clean_name)
    if not export_district_report(record, target):
        console.print(f"Failed to write report to {target}", style="red", markup=False)
        return EXIT_FAILURE
    console.print(f"Report written to {target}")
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint; returns the process exit code."""
    args = build_parser().parse_args(argv)
    configure_logging(
        args.log_level, enable_file=not bool(os.environ.get("DISABLE_FILE_LOGS"))
    )
    console = Console()
    try:
        settings = LookupSettings.from_env(args.csv_source)
    except AppError as exc:
        console.print(exc.message, style="red", markup=False)
        return EXIT_FAILURE

    if args.command == "tui":
        from absence_lookup.ui_textual import run_app

        run_app(settings)
        return EXIT_OK

    presenter = Presenter(MatplotlibChartRenderer(), RichTableRenderer(console))
    controller = LookupController(
        settings.csv_source, presenter, timeout=settings.fetch_timeout
    )
    try:
        if not _load(controller, console):
            return EXIT_FAILURE
        if args.command == "search":
            return cmd_search(controller, console, args.query)
        if args.command == "show":
            return cmd_show(controller, console, args.name, args.chart)
        return cmd_export(controller, console, settings, args.name, args.output)
    except UserInputError as exc:
        console.print(exc.message, style="red", markup=False)
        return EXIT_FAILURE
    finally:
        controller.close()


if __name__ == "__main__":
    raise SystemExit(main())
