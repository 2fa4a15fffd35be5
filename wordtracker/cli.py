"""Command line entry point for WordTracker.

Usage:
    wordtracker <input.txt> -pf|-pl|-po [-f<output.txt>]

Each run loads the persisted index, adds the words of the input file,
saves the index back and prints the alphabetical report (or writes it to
the ``-f`` file).
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import DEFAULT_REPOSITORY, LoggingConfig, ReportMode, TrackerConfig
from .domain.tracker import WordTracker
from .logger import setup_logger
from .persistence import load_repository, save_repository
from .report import render_report, write_report

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="wordtracker",
        description="Track the files and lines where words occur, across runs.",
    )
    parser.add_argument("input",
                        help="Text file to add to the index; recorded exactly as written")

    modes = parser.add_mutually_exclusive_group(required=True)
    modes.add_argument("-pf", dest="mode", action="store_const", const=ReportMode.FILES,
                       help="Print the files each word occurs in")
    modes.add_argument("-pl", dest="mode", action="store_const", const=ReportMode.LINES,
                       help="Print files and line numbers for each word")
    modes.add_argument("-po", dest="mode", action="store_const", const=ReportMode.OCCURRENCES,
                       help="Print files, line numbers and total occurrences")

    parser.add_argument("-f", dest="output", type=Path, metavar="OUTPUT",
                        help="Write the report to OUTPUT (e.g. -freport.txt) instead of stdout")
    parser.add_argument("--repository", type=Path, default=Path(DEFAULT_REPOSITORY),
                        help=f"Persisted index file (default: {DEFAULT_REPOSITORY})")
    parser.add_argument("--encoding", default="utf-8",
                        help="Encoding of the input file (default: utf-8)")
    parser.add_argument("--log-level", default="INFO",
                        help="Logging level (default: INFO)")
    parser.add_argument("--log-dir", type=Path, default=None,
                        help="Also write a timestamped log file to this directory")
    parser.add_argument("--no-color", action="store_true",
                        help="Disable coloured log output")
    return parser


def config_from_args(args: argparse.Namespace) -> TrackerConfig:
    """Build a TrackerConfig from parsed arguments."""
    return TrackerConfig(
        repository_path=args.repository,
        encoding=args.encoding,
        report_mode=args.mode,
        output_file=args.output,
        logging=LoggingConfig(
            level=args.log_level,
            log_dir=args.log_dir,
            color=not args.no_color,
        ),
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Run one tracking pass.

    Args:
        argv: Arguments without the program name (sys.argv[1:] if None)

    Returns:
        Process exit code
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    config = config_from_args(args)

    errors = config.validate()
    if errors:
        parser.error("; ".join(errors))

    setup_logger(config.logging)

    tracker = WordTracker(load_repository(config.repository_path), delimiters=config.delimiters)
    try:
        tracker.track_file(args.input, encoding=config.encoding)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"[!] Error reading file {args.input}: {e}")
        return EXIT_FAILURE

    exit_code = EXIT_OK
    try:
        save_repository(tracker.tree, config.repository_path)
    except OSError as e:
        logger.error(f"[!] Failed to save index to {config.repository_path}: {e}")
        exit_code = EXIT_FAILURE
    else:
        logger.info("[+] File processed and tree updated.")

    text = render_report(tracker.tree.inorder_iterator(), config.report_mode)

    if config.output_file is not None:
        try:
            write_report(text, config.output_file)
        except OSError as e:
            logger.error(f"[!] Failed to write output file {config.output_file}: {e}")
            return EXIT_FAILURE
    else:
        sys.stdout.write(text)

    return exit_code


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
