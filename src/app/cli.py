#!/usr/bin/env python3
"""
Episode Conformer CLI

Renames a season or playlist to the "E01.mkv" pattern.

Usage examples:
python -m src.app.cli -g /media/Show/Season1          # show the numbers found in each file
python -m src.app.cli -p 1 -t /media/Show/Season1     # preview the new names
python -m src.app.cli -p 1 /media/Show/Season1        # rename
"""

import argparse
import re
import sys
from typing import List, Optional

from .graph import EpisodeConformerGraph
from ..core.schema_internal import RenameConfig


UNSIGNED_INTEGER = re.compile(r'\+?[0-9]+')


def value_after(argument: str, args: List[str]) -> Optional[str]:
    """Return the token following the first occurrence of ``argument``."""
    try:
        position = args.index(argument)
    except ValueError:
        return None
    if position + 1 >= len(args):
        return None
    return args[position + 1]


def parse_position(argument: str, args: List[str]) -> Optional[int]:
    """Read the non-negative integer after ``argument``; anything malformed is None."""
    value = value_after(argument, args)
    if value is None or not UNSIGNED_INTEGER.fullmatch(value):
        return None
    number = int(value)
    # Values past the platform index range cannot select anything.
    if number > sys.maxsize:
        return None
    return number


def has_flag(short: str, long: str, args: List[str]) -> bool:
    return short in args or long in args


def read_arguments(args: List[str]) -> RenameConfig:
    """Build the run configuration from raw arguments (program name excluded).

    The directory is always the last token, whatever it is.
    """
    position_short = parse_position("-p", args)
    position_long = parse_position("--position", args)

    return RenameConfig(
        path=args[-1] if args else "",
        selected_index=position_short if position_short is not None else position_long,
        dry_run=has_flag("-t", "--test", args),
        list_numbers=has_flag("-g", "--get_numbers", args),
        show_help=has_flag("-h", "--help", args),
        verbose=has_flag("-v", "--verbose", args),
        quiet=has_flag("-q", "--quiet", args),
        log_dir=value_after("--log-dir", args),
    )


class UsageHelpFormatter(argparse.RawDescriptionHelpFormatter):
    def add_usage(self, usage, actions, groups, prefix=None):
        if prefix is None:
            prefix = "Usage: "
        return super().add_usage(usage, actions, groups, prefix)


def build_help_parser() -> argparse.ArgumentParser:
    # Only renders the usage text; read_arguments does the actual parsing.
    parser = argparse.ArgumentParser(
        prog="conformer",
        usage="conformer [OPTIONS] [PATH TO DIR]",
        description='This tool allows you to rename a season or playlist to conform to the "E01.mkv" pattern.',
        formatter_class=UsageHelpFormatter,
        add_help=False
    )
    options = parser.add_argument_group("Options")
    options.add_argument(
        "-t", "--test",
        action="store_true",
        help="A testrun without renaming the files"
    )
    options.add_argument(
        "-g", "--get_numbers",
        action="store_true",
        help='Shows all found numbers so that you may select the correct index for the "-p" argument'
    )
    options.add_argument(
        "-p", "--position",
        metavar="INDEX",
        help="Selects which numbers to use for the renaming process"
    )
    options.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output"
    )
    options.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Quiet mode - only results and errors"
    )
    options.add_argument(
        "--log-dir",
        metavar="DIR",
        help="Write a detailed log file and a JSON run summary to DIR"
    )
    options.add_argument(
        "-h", "--help",
        action="store_true",
        help="Shows this message"
    )
    return parser


def print_help_msg() -> None:
    print(build_help_parser().format_help(), end="")


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    config = read_arguments(args)

    if config.show_help:
        print_help_msg()
        return 0

    graph_builder = None
    try:
        graph_builder = EpisodeConformerGraph(config)
        workflow = graph_builder.create_graph()
        app = workflow.compile()
        app.invoke(graph_builder.initial_state())
    except Exception as e:
        if graph_builder is not None:
            graph_builder.logger.log_error(f"Error: {e}")
            graph_builder.logger.finalize()
        else:
            print(f"Error: {e}", file=sys.stderr)
        if config.verbose:
            import traceback
            traceback.print_exc()
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
