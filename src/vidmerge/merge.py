"""Merge pipeline — sources plus title-card transitions into one file.

Steps:
  1. Resolve the ordered input list (explicit sources or directory scan).
  2. For every gap between videos, render a card naming the next video,
     save rate × duration frames, and encode them into a clip.
  3. Write the concat list: video, transition, video, transition, ...
  4. Stream-copy everything into the output with ffmpeg's concat demuxer.

All intermediate files live in one private work directory that is
removed when the pipeline ends, whether it succeeded or not.
"""

import shutil
import sys
import tempfile
from pathlib import Path

from .cards import frame_count, render_card, transition_text, write_card_frames
from .common import load_font
from .ffmpeg import concat_file_list, encode_frames
from .filelist import build_file_list, write_file_list
from .scan import resolve_inputs


def _make_transition(
    index: int,
    video: str,
    config: dict,
    font,
    work_dir: Path,
    codec: str,
) -> str:
    """Render and encode the card shown before videos[index]."""
    frame = config["frame"]
    text = config["text"]

    card = render_card(
        transition_text(video, text["template"]),
        frame["width"], frame["height"], font,
        text["color"], text["background"],
    )
    count = frame_count(frame["rate"], text["duration"])
    pattern = write_card_frames(card, work_dir / "frames", index, count)

    clip_path = str(work_dir / f"text_transition_{index}.mp4")
    encode_frames(pattern, frame["rate"], clip_path, codec=codec)
    return clip_path


def _open_work_dir(parent: str) -> tuple[Path, list[Path]]:
    """Create the private work directory.

    Returns the work directory and every configured parent directory
    that did not exist beforehand, topmost first, so they can be
    removed later.
    """
    created = []
    if parent:
        parent_path = Path(parent)
        missing = parent_path
        while not missing.exists():
            created.insert(0, missing)
            missing = missing.parent
        parent_path.mkdir(parents=True, exist_ok=True)
        work_dir = Path(tempfile.mkdtemp(prefix="vidmerge-", dir=parent_path))
    else:
        work_dir = Path(tempfile.mkdtemp(prefix="vidmerge-"))
    return work_dir, created


def _close_work_dir(work_dir: Path, created: list[Path]) -> None:
    try:
        shutil.rmtree(work_dir)
    except OSError as e:
        print(f"Warning: could not remove work directory {work_dir}: {e}", file=sys.stderr)

    # Leaf first; stop at the first directory something else wrote into.
    for directory in reversed(created):
        try:
            directory.rmdir()
        except OSError:
            break


def merge(config: dict, codec: str = "libx264") -> str:
    """Run the full merge pipeline for a loaded config.

    Args:
        config: Normalized config from load_config().
        codec: Codec for transition clips, "libx264" or "h264_nvenc".

    Returns:
        The output path.

    Raises:
        ValueError: No input videos.
        FileNotFoundError: Missing source directory.
        OSError: Font cannot be loaded, or a file cannot be written.
        subprocess.CalledProcessError: An ffmpeg step failed.
    """
    videos = resolve_inputs(config)
    if not videos:
        raise ValueError("No videos to merge")

    output = config["dest"]["output"]
    duration = config["text"]["duration"]
    font = load_font(config["font"]["size"], config["font"]["path"] or None)

    print(f"Merging {len(videos)} videos")
    for i, video in enumerate(videos):
        print(f"  [{i}] {video}")

    work_dir, created_dirs = _open_work_dir(config["dest"]["work_dir"])
    try:
        transitions = {}
        if duration > 0:
            for i in range(1, len(videos)):
                print(f"  CARD   {i}/{len(videos) - 1}  {Path(videos[i]).name}", flush=True)
                transitions[i] = _make_transition(
                    i, videos[i], config, font, work_dir, codec,
                )

        file_list = write_file_list(
            build_file_list(videos, transitions), work_dir / "filelist.txt",
        )

        print(f"Writing to: {output}", flush=True)
        concat_file_list(file_list, output)
    finally:
        _close_work_dir(work_dir, created_dirs)

    print(f"\nDone: {output}")
    return output
