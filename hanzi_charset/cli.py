#!/usr/bin/env python3
"""Command line interface for building and analyzing charsets.

Example:
    Preview the distribution for a 5800 character charset::

        $ hanzi-charset extend --limit 5800 --preview --stroke-data strokes.json

    Merge a secondary list and write the document::

        $ hanzi-charset extend --include support/secondary.txt --limit 6000 \\
              --out content-extended.txt --stroke-data strokes.json

    Check a generated document::

        $ hanzi-charset analyze --file content-extended.txt --stroke-data strokes.json

Exit status is 0 on success and 1 when a fatal IO error aborts the run.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from tqdm import tqdm

from .analyzer import analyze_file, format_report
from .config import (
    DEFAULT_BASELINE,
    DEFAULT_FONT_DIR,
    DEFAULT_LIMIT,
    DEFAULT_OUTPUT,
    AnalyzeConfig,
    ExtendConfig,
)
from .domain import CharsetIOError
from .pipeline import run_extend
from .strokes import StrokeTable

logger = logging.getLogger(__name__)


class TqdmHandler(logging.StreamHandler):
    """Console handler that prints through ``tqdm.write``.

    Warnings about skipped fonts arrive while the font scan progress bar is
    drawn; writing through tqdm keeps the bar on its own line.
    """

    def emit(self, record: logging.LogRecord) -> None:
        try:
            tqdm.write(self.format(record), file=self.stream)
        except Exception:
            self.handleError(record)


def configure_logging(level: str = 'INFO', log_file: str | None = None) -> None:
    """Route ``hanzi_charset`` logging to stderr and an optional file.

    The console gets short ``LEVEL message`` lines; the file, when given,
    gets timestamped lines with the logger name.

    Args:
        level: Log level name ('DEBUG', 'INFO', 'WARNING', 'ERROR').
        log_file: Optional path of a UTF-8 log file.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    root_logger.handlers.clear()

    console = TqdmHandler(sys.stderr)
    console.setFormatter(logging.Formatter('%(levelname)s %(message)s'))
    root_logger.addHandler(console)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setFormatter(logging.Formatter(
            fmt='%(asctime)s %(levelname)-8s [%(name)s] %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S',
        ))
        root_logger.addHandler(file_handler)

    # fontTools logs every table it fails to decompile
    logging.getLogger('fontTools').setLevel(logging.ERROR)
    logger.debug("Logging configured: level=%s, file=%s", level, log_file or 'stderr')


def _add_stroke_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument('--stroke-data', type=Path, required=True,
                        help='Stroke counts: JSON {char: count} or Unihan kTotalStrokes file')
    parser.add_argument('--stroke-order-dir', type=Path, default=None,
                        help='hanzi-writer-data directory used when a count is missing')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='hanzi-charset',
        description='Build and analyze stroke-grouped Chinese charsets')
    parser.add_argument('--log-level', default='INFO', help='Logging level (default: INFO)')
    parser.add_argument('--log-file', default=None, help='Also log to this file')
    sub = parser.add_subparsers(dest='command', required=True)

    extend = sub.add_parser('extend', help='Extend the baseline charset')
    extend.add_argument('--baseline', type=Path, default=Path(DEFAULT_BASELINE),
                        help=f'Baseline document (default: {DEFAULT_BASELINE})')
    extend.add_argument('--limit', type=int, default=DEFAULT_LIMIT,
                        help=f'Target total number of characters (default: {DEFAULT_LIMIT})')
    extend.add_argument('--out', type=Path, default=Path(DEFAULT_OUTPUT),
                        help=f'Output path (default: {DEFAULT_OUTPUT})')
    extend.add_argument('--preview', action='store_true',
                        help='Only print the distribution, do not write')
    extend.add_argument('--font-dir', type=Path, default=Path(DEFAULT_FONT_DIR),
                        help=f'Directory scanned for fonts (default: {DEFAULT_FONT_DIR})')
    extend.add_argument('--include', type=Path, action='append', default=[],
                        help='Extra character list, separated by spaces, commas or newlines; repeatable')
    extend.add_argument('--progress', action='store_true', help='Show a progress bar for font scanning')
    _add_stroke_args(extend)

    analyze = sub.add_parser('analyze', help='Report statistics for a generated document')
    analyze.add_argument('--file', '-f', type=Path, default=Path(DEFAULT_OUTPUT),
                         help=f'Document to analyze (default: {DEFAULT_OUTPUT})')
    _add_stroke_args(analyze)
    return parser


def cmd_extend(args: argparse.Namespace) -> int:
    if args.limit < 0:
        logger.error("--limit must be >= 0, got %d", args.limit)
        return 2
    config = ExtendConfig(
        baseline=args.baseline,
        output=args.out,
        limit=args.limit,
        preview=args.preview,
        font_dir=args.font_dir,
        include_files=list(args.include),
        progress=args.progress,
    )
    source = StrokeTable.from_paths(args.stroke_data, args.stroke_order_dir)
    run_extend(config, source)
    return 0


def cmd_analyze(args: argparse.Namespace) -> int:
    config = AnalyzeConfig(file=args.file)
    source = StrokeTable.from_paths(args.stroke_data, args.stroke_order_dir)
    report = analyze_file(config.file, source,
                          baseline=config.baseline_count, sentinels=config.sentinels)
    print(format_report(report, label=str(config.file)))
    return 0


COMMANDS = {
    'extend': cmd_extend,
    'analyze': cmd_analyze,
}


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level, args.log_file)
    try:
        return COMMANDS[args.command](args)
    except CharsetIOError as e:
        logger.error("%s", e)
        return 1


if __name__ == '__main__':
    sys.exit(main())
