"""Command-line entrypoint rendering nuclei findings as a table or HTML."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from ..services.html_report import (
    HTML_OUTPUT_FILENAME,
    HtmlReportError,
    write_html_report,
)
from ..services.jsonl_loader import DataFileError
from ..services.report_config import ReportConfig
from ..services.report_pipeline import build_report
from ..services.severity_filter import parse_severity_list
from ..services.table_renderer import render_table

_LOG = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"
LOG_DATE_FORMAT = "%Y/%m/%d %H:%M:%S"


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nuclei-report",
        description="Render nuclei JSONL findings as a terminal table or HTML report.",
    )
    parser.add_argument(
        "-d",
        "--data",
        dest="data_file",
        type=Path,
        required=True,
        help="Path to the JSON data file (one finding per line).",
    )
    parser.add_argument(
        "-s",
        "--severity",
        default="",
        help="Filter results by severity (comma separated).",
    )
    parser.add_argument(
        "--html",
        action="store_true",
        help=f"Write an HTML report to {HTML_OUTPUT_FILENAME} instead of printing a table.",
    )
    return parser


def configure_logging(config: ReportConfig) -> None:
    """Send diagnostics to stderr so the table on stdout stays clean."""

    logging.basicConfig(
        level=config.log_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stderr,
    )


def main(argv: Sequence[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    config = ReportConfig.from_env()
    configure_logging(config)

    severities = parse_severity_list(args.severity)
    try:
        findings = build_report(args.data_file, severities)
        if args.html:
            write_html_report(findings, HTML_OUTPUT_FILENAME, title=config.html_title)
        else:
            render_table(findings)
    except (DataFileError, HtmlReportError) as exc:
        _LOG.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
