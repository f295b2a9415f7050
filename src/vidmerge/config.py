"""Config loader — what to merge, where to write it, how cards look.

Parses JSON (or YAML) configs, resolves ${path} variables, converts hex
colors to RGB tuples, applies defaults and validates numeric fields.

Config schema:
  dest:
    output: "dest/merged.mp4"        # empty → timestamped default
    intermediateTextDir: "tmp/text"  # empty → system temp dir
  source: ["${media}/a.mp4"]          # empty → scan sourceDir
  sourceDir: "./source"
  paths:
    media: "/data/videos"
  font:
    path: "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf"
    size: 64
  frame: {width: 1920, height: 1080, rate: 30}
  text:
    color: "#FFFFFF"
    background: "#000000"
    duration: 2                       # seconds; 0 → hard cuts
    template: "Next: {name}"
"""

import json
import math
from datetime import datetime
from pathlib import Path

import yaml

from .common import parse_hex_color, resolve_path_vars


DEFAULT_SOURCE_DIR = "./source"
DEFAULT_OUTPUT_DIR = "./dest"
DEFAULT_TEMPLATE = "Next: {name}"

DEFAULT_FONT_SIZE = 64
DEFAULT_FRAME = {"width": 1920, "height": 1080, "rate": 30}
DEFAULT_TEXT = {
    "color": "#FFFFFF",
    "background": "#000000",
    "duration": 2,
    "template": DEFAULT_TEMPLATE,
}

YAML_SUFFIXES = {".yaml", ".yml"}


def default_output_path(now: datetime | None = None) -> str:
    """Timestamped output path, e.g. ./dest/output_19_10_2026_14_05_09.mp4."""
    now = now or datetime.now()
    return f"{DEFAULT_OUTPUT_DIR}/output_{now:%d_%m_%Y_%H_%M_%S}.mp4"


def _read_raw(config_path: Path) -> dict:
    with open(config_path) as f:
        if config_path.suffix.lower() in YAML_SUFFIXES:
            try:
                raw = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Config {config_path}: invalid YAML: {e}") from e
        else:
            try:
                raw = json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"Config {config_path}: invalid JSON: {e}") from e

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ValueError(f"Config {config_path}: top level must be an object")
    return raw


def _section(raw: dict, key: str) -> dict:
    value = raw.get(key) or {}
    if not isinstance(value, dict):
        raise ValueError(f"Config: '{key}' must be an object")
    return value


def _positive_number(value, field: str, integer: bool = False):
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"Config: {field} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise ValueError(f"Config: {field} must be finite, got {value!r}")
    if integer and value != int(value):
        raise ValueError(f"Config: {field} must be a whole number, got {value!r}")
    if value <= 0:
        raise ValueError(f"Config: {field} must be > 0, got {value!r}")
    return int(value) if integer else value


def load_config(config_path: str | Path) -> dict:
    """Load, validate, and normalize a merge config.

    Processing pipeline:
      1. Parse JSON (or YAML for .yaml/.yml files).
      2. Resolve ${path} variables in every path field.
      3. Apply defaults for missing sections and fields.
      4. Parse text colors to RGB tuples (malformed → black).
      5. Validate frame size, rate, font size, and duration.

    Args:
        config_path: Path to the config file.

    Returns:
        Normalized config dict.

    Raises:
        FileNotFoundError: Missing config file.
        ValueError: Malformed file or invalid field.
    """
    config_path = Path(config_path)
    raw = _read_raw(config_path)

    paths = _section(raw, "paths")

    def _path(value):
        return resolve_path_vars(str(value), paths) if value else ""

    # Destination.
    dest = _section(raw, "dest")
    output = _path(dest.get("output")) or default_output_path()
    work_dir = _path(dest.get("intermediateTextDir"))

    # Sources: explicit list wins over the scanned directory.
    source = raw.get("source") or []
    if not isinstance(source, list):
        raise ValueError("Config: 'source' must be a list of paths")
    sources = [_path(s) for s in source]
    source_dir = _path(raw.get("sourceDir")) or DEFAULT_SOURCE_DIR

    # Font.
    font = _section(raw, "font")
    font_size = _positive_number(font.get("size", DEFAULT_FONT_SIZE), "font.size")

    # Frame: yuv420p needs even dimensions.
    frame = {**DEFAULT_FRAME, **_section(raw, "frame")}
    width = _positive_number(frame["width"], "frame.width", integer=True)
    height = _positive_number(frame["height"], "frame.height", integer=True)
    rate = _positive_number(frame["rate"], "frame.rate", integer=True)
    if width % 2 or height % 2:
        raise ValueError(
            f"Config: frame size must be even for yuv420p, got {width}x{height}"
        )

    # Text.
    text = {**DEFAULT_TEXT, **_section(raw, "text")}
    duration = text["duration"]
    if (
        isinstance(duration, bool)
        or not isinstance(duration, (int, float))
        or not math.isfinite(duration)
        or duration < 0
    ):
        raise ValueError(f"Config: text.duration must be >= 0, got {duration!r}")
    template = text["template"]
    if not isinstance(template, str) or not template:
        raise ValueError("Config: text.template must be a non-empty string")

    return {
        "dest": {"output": output, "work_dir": work_dir},
        "sources": sources,
        "source_dir": source_dir,
        "font": {"path": _path(font.get("path")), "size": max(1, round(font_size))},
        "frame": {"width": width, "height": height, "rate": rate},
        "text": {
            "color": parse_hex_color(text["color"]),
            "background": parse_hex_color(text["background"]),
            "duration": duration,
            "template": template,
        },
    }


def validate_config_paths(config: dict) -> None:
    """Check that explicit sources and the configured font exist on disk.

    Raises:
        FileNotFoundError: Lists all missing files.
    """
    missing = [s for s in config["sources"] if not Path(s).exists()]
    font_path = config["font"]["path"]
    if font_path and not Path(font_path).exists():
        missing.append(font_path)

    if missing:
        msg = f"Missing {len(missing)} file(s):\n"
        for p in missing:
            msg += f"  - {p}\n"
        raise FileNotFoundError(msg)
