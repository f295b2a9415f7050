"""Subcommand dispatcher for vidmerge.

Usage:
    vidmerge merge --config config.json [--output merged.mp4]
    vidmerge scan  ./source
"""

import argparse
import sys


def main(args=None):
    parser = argparse.ArgumentParser(
        prog="vidmerge",
        description="Concatenate videos with generated title-card transitions.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # Register subcommands. Each delegates to its own module's main().
    subparsers.add_parser("merge", help="Merge videos described by a config file")
    subparsers.add_parser("scan", help="List the videos a directory scan would merge")

    # Parse only the subcommand name, pass the rest to the subcommand's parser.
    parsed, remaining = parser.parse_known_args(args)

    if parsed.command is None:
        parser.print_help()
        sys.exit(1)

    if parsed.command == "merge":
        from .merge_cli import main as merge_main
        merge_main(remaining)
    elif parsed.command == "scan":
        from .scan_cli import main as scan_main
        scan_main(remaining)


if __name__ == "__main__":
    main()
