"""Input discovery — which videos get merged, and in what order."""

from pathlib import Path


VIDEO_EXTENSIONS = {".mp4", ".mov", ".avi", ".mkv"}


def find_videos(source_dir: str | Path) -> list[str]:
    """Recursively collect video files under source_dir, sorted by path.

    Extension matching is case-insensitive. Hidden files are not
    special-cased.

    Raises:
        FileNotFoundError: source_dir does not exist or is not a directory.
    """
    root = Path(source_dir)
    if not root.is_dir():
        raise FileNotFoundError(f"Source directory not found: {source_dir}")

    videos = [
        str(p) for p in root.rglob("*")
        if p.is_file() and p.suffix.lower() in VIDEO_EXTENSIONS
    ]
    return sorted(videos)


def resolve_inputs(config: dict) -> list[str]:
    """Return the ordered list of videos to merge.

    The explicit source list wins when non-empty; otherwise the source
    directory is scanned. Both are sorted lexicographically.
    """
    if config["sources"]:
        return sorted(config["sources"])
    return find_videos(config["source_dir"])
