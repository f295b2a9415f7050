#!/usr/bin/env python3
"""Generate synthetic source videos for the vidmerge demo config.

Creates a few solid-color clips under examples/demo-source/, one of them
in a subdirectory so the recursive scan is visible. Size and frame rate
match examples/demo-config.json, so the title cards stream-copy cleanly.

Usage:
    python examples/generate_demo_sources.py
    # Then merge:
    vidmerge merge --config examples/demo-config.json
"""

from pathlib import Path

from moviepy import ColorClip

OUTPUT_DIR = Path(__file__).resolve().parent / "demo-source"
SIZE = (640, 360)
FPS = 30

CLIPS = [
    ("01-intro.mp4",          (180, 60, 60),  2.0),  # red
    ("02-walkthrough.mp4",    (60, 60, 180),  3.0),  # blue
    ("extras/03-bloopers.mp4", (60, 160, 60), 1.5),  # green
]


def main():
    for name, color, duration in CLIPS:
        out = OUTPUT_DIR / name
        if out.exists():
            print(f"  skip {name} (exists)")
            continue
        out.parent.mkdir(parents=True, exist_ok=True)

        clip = ColorClip(size=SIZE, color=color, duration=duration)
        clip.write_videofile(
            str(out), fps=FPS, codec="libx264", audio=False,
            ffmpeg_params=["-pix_fmt", "yuv420p"], logger=None,
        )
        print(f"  wrote {name} ({duration}s)")

    print(f"\nDone. {len(CLIPS)} clips in {OUTPUT_DIR}")


if __name__ == "__main__":
    main()
