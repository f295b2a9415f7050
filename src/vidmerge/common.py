"""vidmerge.common — shared utilities for card rendering and config.

Contains: color parsing, path variable resolution, font loading,
and centered text rendering.
"""

import re
from pathlib import Path

from PIL import Image, ImageDraw, ImageFont


# ── Font paths ─────────────────────────────────────────────────────
# Used when the config does not name a font. DejaVu Sans ships with
# most Linux distributions.

FONT_PATHS = [
    Path("/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf"),
    Path("/usr/share/fonts/TTF/DejaVuSans.ttf"),
    Path("/Library/Fonts/Arial.ttf"),
]

FALLBACK_COLOR = (0, 0, 0)

_HEX_RE = re.compile(r"^[0-9a-fA-F]{6}$")


# ── Color utilities ────────────────────────────────────────────────

def parse_hex_color(hex_str) -> tuple[int, int, int]:
    """Convert '#RRGGBB' or 'RRGGBB' string to (R, G, B) tuple.

    Malformed values (wrong length, non-hex digits, non-strings) fall
    back to black.
    """
    if not isinstance(hex_str, str):
        return FALLBACK_COLOR
    hex_str = hex_str.strip().removeprefix("#")
    if not _HEX_RE.match(hex_str):
        return FALLBACK_COLOR
    return (int(hex_str[0:2], 16), int(hex_str[2:4], 16), int(hex_str[4:6], 16))


# ── Path utilities ─────────────────────────────────────────────────

def resolve_path_vars(text: str, paths: dict[str, str]) -> str:
    """Replace ${name} variables in a string using the paths dict."""
    def _replace(match):
        key = match.group(1)
        if key not in paths:
            raise ValueError(f"Unknown path variable: ${{{key}}}")
        return str(paths[key])
    return re.sub(r"\$\{(\w+)\}", _replace, text)


# ── Font loading ───────────────────────────────────────────────────

def load_font(
    size: int, path: str | Path | None = None,
) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    """Load a TrueType font at the given size.

    An explicit path must load; OSError propagates so a typo in the
    config fails loudly. Without a path the FONT_PATHS list is tried,
    then Pillow's default font.
    """
    if path:
        return ImageFont.truetype(str(path), size=size)

    for font_path in FONT_PATHS:
        if font_path.exists():
            try:
                return ImageFont.truetype(str(font_path), size=size)
            except OSError:
                continue
    return ImageFont.load_default(size=size)


# ── Text rendering ─────────────────────────────────────────────────

def fit_text(
    draw: ImageDraw.ImageDraw,
    text: str,
    font: ImageFont.FreeTypeFont,
    max_width: int,
) -> str:
    """Truncate text with an ellipsis until it fits max_width pixels."""
    bbox = draw.textbbox((0, 0), text, font=font)
    while (bbox[2] - bbox[0]) > max_width and len(text) > 5:
        text = text[:-4] + "..."
        bbox = draw.textbbox((0, 0), text, font=font)
    return text


def render_text_centered(
    img: Image.Image,
    text: str,
    font: ImageFont.FreeTypeFont,
    color: tuple[int, int, int],
    max_width: int | None = None,
) -> tuple[int, int, int, int]:
    """Draw text centered on a Pillow image and return its bounding box.

    The bbox offsets reported by Pillow are subtracted so the visible
    ink, not the layout box, ends up in the middle of the frame.
    """
    draw = ImageDraw.Draw(img)
    if max_width:
        text = fit_text(draw, text, font, max_width)

    left, top, right, bottom = draw.textbbox((0, 0), text, font=font)
    tw, th = right - left, bottom - top
    x = (img.width - tw) // 2 - left
    y = (img.height - th) // 2 - top
    draw.text((x, y), text, fill=color, font=font)
    return (x + left, y + top, x + right, y + bottom)
