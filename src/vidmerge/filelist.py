"""Concat-demuxer file list — one `file '<path>'` line per clip.

Entries are absolute so the list file can live in the work directory
while sources live anywhere. ffmpeg's quoting rule for a single quote
inside a quoted path is to close the quote, escape it, and reopen.
"""

from pathlib import Path


def quote_path(path: str | Path) -> str:
    """Quote a path for a concat list entry."""
    escaped = str(Path(path).resolve()).replace("'", "'\\''")
    return f"'{escaped}'"


def build_file_list(videos: list[str], transitions: dict[int, str]) -> list[str]:
    """Interleave source videos with their transition clips.

    Args:
        videos: Ordered source videos.
        transitions: Maps video index i (i >= 1) to the clip played
            right before videos[i]. Indices without an entry are hard cuts.

    Returns:
        Lines for the list file, without trailing newlines.
    """
    lines = []
    for i, video in enumerate(videos):
        if i > 0 and i in transitions:
            lines.append(f"file {quote_path(transitions[i])}")
        lines.append(f"file {quote_path(video)}")
    return lines


def write_file_list(lines: list[str], path: str | Path) -> str:
    """Write the list file and return its path."""
    Path(path).write_text("".join(f"{line}\n" for line in lines))
    return str(path)
