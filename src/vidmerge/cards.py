"""Title-card rendering for transitions.

A card is a solid background with one centered line of text naming the
upcoming video. Every frame of a transition is the same card, so it is
rendered once and saved `count` times for ffmpeg's image2 demuxer.
"""

from pathlib import Path

from PIL import Image

from .common import render_text_centered


# Horizontal margin, as a fraction of frame width, kept free of text.
_TEXT_MARGIN_FRAC = 0.05

FRAME_NAME = "text_{index}_frame_{frame:05d}.png"
FRAME_PATTERN = "text_{index}_frame_%05d.png"


def transition_text(video_path: str | Path, template: str) -> str:
    """Card text for the video that follows the transition."""
    return template.replace("{name}", Path(video_path).name)


def frame_count(rate: int, duration: float) -> int:
    """Number of frames in a transition of `duration` seconds.

    Any positive duration yields at least one frame.
    """
    if duration <= 0:
        return 0
    return max(1, round(rate * duration))


def render_card(
    text: str,
    width: int,
    height: int,
    font,
    text_color: tuple[int, int, int],
    bg_color: tuple[int, int, int],
) -> Image.Image:
    """Render one card: background fill plus centered, width-capped text."""
    img = Image.new("RGB", (width, height), bg_color)
    max_width = int(width * (1 - 2 * _TEXT_MARGIN_FRAC))
    render_text_centered(img, text, font, text_color, max_width=max_width)
    return img


def write_card_frames(
    card: Image.Image,
    out_dir: str | Path,
    index: int,
    count: int,
) -> str:
    """Save `count` copies of the card as numbered PNGs.

    Returns:
        The printf-style input pattern ffmpeg expects for this sequence.
    """
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    for frame in range(count):
        card.save(out_dir / FRAME_NAME.format(index=index, frame=frame))
    return str(out_dir / FRAME_PATTERN.format(index=index))
