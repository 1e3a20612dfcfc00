#!/usr/bin/env python3
"""
Main entry point for pagefit
Refits every page of the documents in a folder onto a named page size
"""

from __future__ import annotations

import argparse
import logging
import sys
import textwrap
from pathlib import Path
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from pagefit import PageSizeTable


def setup_logging(level: str = "INFO") -> None:
    """Setup logging configuration with timestamped log files."""
    from pagefit.misc import tz_now  # noqa: PLC0415 - lazy import for startup performance

    logs_dir = Path(".logs")
    logs_dir.mkdir(exist_ok=True)

    timestamp = tz_now().strftime("%Y-%m-%d_%H-%M-%S")
    log_filename = logs_dir / f"{timestamp}_pagefit.log"

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout), logging.FileHandler(log_filename, encoding="utf-8")],
    )


def print_usage(parser: argparse.ArgumentParser, table: PageSizeTable, file: TextIO | None = None) -> None:
    """Print usage followed by every known page-size name."""
    out = file or sys.stderr
    parser.print_usage(out)
    print(
        f"   Where: Page size chosen from the list below. Default is {table.default_size.name} "
        f"({table.default_size.width:g} x {table.default_size.height:g} pt).\n",
        file=out,
    )
    print(table.format_columns(), file=out)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = _build_argument_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level)
    logger = logging.getLogger(__name__)

    return _execute_command(args, parser, logger)


def _build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pagefit",
        description=(
            "Resize every page of the documents in a folder to a target page size, "
            "scaling the content to fit and centering it"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=textwrap.dedent(
            """
            Examples:
              # Fit to US Letter (default); writes <folder>/out/<name>_out.pdf
              python main.py scans/

              # Fit to A4, page-size names are case-insensitive
              python main.py scans/ a4

              # Keep going past broken files and report them at the end
              python main.py scans/ A4 --continue-on-error

              # Custom sizes and output naming from a YAML file
              python main.py scans/ POSTCARD --config pagefit.yaml

              # Show all known page sizes
              python main.py --list-sizes
            """
        ),
    )

    parser.add_argument("input_folder", nargs="?", help="Folder containing the documents to convert")
    parser.add_argument(
        "page_size",
        nargs="?",
        help="Target page size name (default: LETTER). Use --list-sizes to see all names",
    )
    parser.add_argument("--config", "-c", type=str, help="YAML configuration file")
    parser.add_argument(
        "--output-dir-name",
        type=str,
        help="Name of the output subfolder created inside the input folder (default: out)",
    )
    parser.add_argument(
        "--suffix",
        type=str,
        help="Suffix appended to output file names (default: _out). Write --suffix=-x for values starting with a dash",
    )
    parser.add_argument(
        "--continue-on-error",
        action="store_true",
        help="Skip documents that fail instead of aborting the batch (exit code is still 1)",
    )
    parser.add_argument("--list-sizes", action="store_true", help="List known page sizes and exit")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Logging level (default: INFO)",
    )
    return parser


def _execute_command(args: argparse.Namespace, parser: argparse.ArgumentParser, logger: logging.Logger) -> int:
    from pagefit import FitBatchProcessor, FitConfig, PageSizeTable  # noqa: PLC0415
    from pagefit.exceptions import ConfigurationError, PageFitError  # noqa: PLC0415

    table = PageSizeTable.default()
    try:
        config = FitConfig.from_cli(args)
        table = config.build_table(table)

        if args.list_sizes:
            print(table.format_columns())
            return 0

        if not args.input_folder:
            logger.error("Missing input folder")
            print_usage(parser, table)
            return 1

        page_size = config.validate(table)
        summary = FitBatchProcessor(page_size, config).process_directory(args.input_folder)
    except ConfigurationError as exc:
        logger.error("%s", exc)
        print_usage(parser, table)
        return 1
    except PageFitError as exc:
        logger.error("Exception thrown: %s: %s", type(exc).__name__, exc)
        return 1
    except KeyboardInterrupt:
        logger.info("Process interrupted by user")
        return 1
    except Exception as exc:  # noqa: BLE001 - retain broad logging for CLI
        logger.error("Unexpected error: %s", exc, exc_info=True)
        return 1

    for result in summary.files:
        if not result.ok:
            logger.error("  %s: %s: %s", result.input_path.name, result.error_kind, result.error)
    return 0 if summary.succeeded else 1


if __name__ == "__main__":
    sys.exit(main())
