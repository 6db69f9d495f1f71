# src/cord_convert/cli.py

"""
Command-line entry point.

Usage:
  convert <dataset path> <output path> [--metadata-file NAME] [--verbose]

Warnings for skipped papers go to standard output. The process never
signals failure through its exit status.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import NoReturn

from cord_convert.config import DEFAULT_METADATA_FILENAME, ConvertConfig
from cord_convert.converter import Converter
from cord_convert.errors import MetadataOpenError
from cord_convert.observability import LoggingMetricsHook, MetricsHook, NoOpMetricsHook

logger = logging.getLogger(__name__)


class _UsageError(Exception):
    pass


class _ArgumentParser(argparse.ArgumentParser):
    """Reports bad arguments to the caller instead of exiting with status 2."""

    def error(self, message: str) -> NoReturn:
        raise _UsageError(message)


def _build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="convert",
        usage="convert <dataset path> <output path>",
        description="Convert paper JSON documents listed in a metadata CSV to text.",
    )
    parser.add_argument("dataset_dir", nargs="?", type=Path)
    parser.add_argument("output_dir", nargs="?", type=Path)
    parser.add_argument(
        "--metadata-file",
        default=DEFAULT_METADATA_FILENAME,
        help="metadata CSV name inside the dataset directory",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    try:
        args, extra = parser.parse_known_args(argv)
    except _UsageError as e:
        parser.print_usage(sys.stdout)
        print(f"convert: {e}")
        return

    if args.dataset_dir is None or args.output_dir is None:
        parser.print_usage(sys.stdout)
        return

    logging.basicConfig(
        stream=sys.stdout,
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )
    if extra:
        logger.warning("Ignoring extra arguments: %s", " ".join(extra))

    metrics_hook: MetricsHook = (
        LoggingMetricsHook() if args.verbose else NoOpMetricsHook()
    )
    config = ConvertConfig(
        dataset_dir=args.dataset_dir,
        output_dir=args.output_dir,
        metadata_filename=args.metadata_file,
    )
    try:
        Converter(config, metrics_hook=metrics_hook).run()
    except MetadataOpenError as e:
        logger.error("%s", e)


if __name__ == "__main__":
    main()
