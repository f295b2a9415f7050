"""CLI for input discovery — show what a directory scan would merge.

Usage:
    vidmerge scan ./source
"""

import argparse
import sys

from .scan import VIDEO_EXTENSIONS, find_videos


def main(args=None):
    parser = argparse.ArgumentParser(
        description="List videos found under a directory, in merge order.",
    )
    parser.add_argument("source_dir", help="Directory to scan recursively")
    parsed = parser.parse_args(args)

    try:
        videos = find_videos(parsed.source_dir)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if not videos:
        exts = ", ".join(sorted(VIDEO_EXTENSIONS))
        print(f"No video files found in {parsed.source_dir} with extensions: {exts}")
        return

    print(f"Found {len(videos)} video files:")
    for i, video in enumerate(videos):
        print(f"  {i}: {video}")


if __name__ == "__main__":
    main()
