"""Shared test fixtures for vidmerge tests."""

import json
import subprocess

import pytest
import imageio_ffmpeg

_FFMPEG = imageio_ffmpeg.get_ffmpeg_exe()

# Small frames keep ffmpeg fast; sources and cards share size and rate
# so the concat demuxer can stream-copy them together.
TEST_SIZE = (320, 240)
TEST_RATE = 10


@pytest.fixture
def make_video(tmp_path):
    """Factory that writes a short solid-color h264 clip (no audio)."""
    def _make(name, color="blue", duration=1, directory=None):
        out_dir = directory or tmp_path / "source"
        out_dir.mkdir(parents=True, exist_ok=True)
        out = out_dir / name
        w, h = TEST_SIZE
        subprocess.run(
            [
                _FFMPEG, "-y",
                "-f", "lavfi",
                "-i", f"color=c={color}:s={w}x{h}:d={duration}:r={TEST_RATE}",
                "-c:v", "libx264", "-crf", "28", "-pix_fmt", "yuv420p",
                str(out),
            ],
            check=True,
            capture_output=True,
        )
        return out
    return _make


@pytest.fixture
def write_config(tmp_path):
    """Factory that writes a config dict as JSON and returns its path."""
    def _write(content: dict, name="config.json"):
        path = tmp_path / name
        path.write_text(json.dumps(content))
        return path
    return _write


@pytest.fixture
def base_config(tmp_path):
    """Minimal config matching the make_video clips."""
    w, h = TEST_SIZE
    return {
        "dest": {
            "output": str(tmp_path / "out" / "merged.mp4"),
            "intermediateTextDir": str(tmp_path / "work"),
        },
        "sourceDir": str(tmp_path / "source"),
        "font": {"size": 24},
        "frame": {"width": w, "height": h, "rate": TEST_RATE},
        "text": {"color": "#FFFFFF", "background": "#202020", "duration": 1},
    }
