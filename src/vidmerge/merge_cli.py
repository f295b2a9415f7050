"""CLI for merging — run the pipeline described by a config file.

Usage:
    vidmerge merge --config config.json
    vidmerge merge --config config.yaml --output final.mp4 --gpu
    vidmerge merge --config config.json --validate
"""

import argparse
import subprocess
import sys

from .config import load_config, validate_config_paths
from .ffmpeg import probe_duration
from .merge import merge
from .scan import resolve_inputs


def _ffmpeg_tail(err: subprocess.CalledProcessError, lines: int = 10) -> str:
    """Last lines of ffmpeg's stderr, where it reports the actual failure."""
    stderr = err.stderr or b""
    if isinstance(stderr, bytes):
        stderr = stderr.decode(errors="replace")
    return "\n".join(stderr.strip().splitlines()[-lines:])


def _validate(config: dict) -> None:
    validate_config_paths(config)
    videos = resolve_inputs(config)
    print(f"Config valid: {len(videos)} videos")
    for i, video in enumerate(videos):
        print(f"  {i}: {probe_duration(video):.1f}s  {video}")
    frame = config["frame"]
    print(f"Frame: {frame['width']}x{frame['height']}, {frame['rate']}fps")
    print(f"Output: {config['dest']['output']}")
    print("All paths verified.")


def main(args=None):
    parser = argparse.ArgumentParser(
        description="Merge videos with title-card transitions.",
    )
    parser.add_argument(
        "--config", default="config.json",
        help="Path to JSON (or YAML) config file (default: config.json)",
    )
    parser.add_argument(
        "--output", default=None,
        help="Output path, overrides dest.output from the config",
    )
    parser.add_argument(
        "--gpu", action="store_true",
        help="Encode transitions with h264_nvenc. Default is CPU (libx264).",
    )
    parser.add_argument(
        "--validate", action="store_true",
        help="Validate config only: check paths and list inputs, don't render",
    )
    parsed = parser.parse_args(args)

    try:
        config = load_config(parsed.config)
        if parsed.output:
            config["dest"]["output"] = parsed.output

        if parsed.validate:
            _validate(config)
            return

        validate_config_paths(config)
        merge(config, codec="h264_nvenc" if parsed.gpu else "libx264")
    except subprocess.CalledProcessError as e:
        print(f"Error: ffmpeg failed with exit code {e.returncode}", file=sys.stderr)
        tail = _ffmpeg_tail(e)
        if tail:
            print(tail, file=sys.stderr)
        sys.exit(1)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
