"""ffmpeg invocations — encode card frames, concatenate the file list."""

import subprocess
from pathlib import Path

import imageio_ffmpeg
from moviepy import VideoFileClip

_FFMPEG = imageio_ffmpeg.get_ffmpeg_exe()


def _codec_params(codec):
    """Return (codec, ffmpeg_params) for the given codec name."""
    if codec == "h264_nvenc":
        return codec, ["-cq", "20", "-pix_fmt", "yuv420p"]
    return codec, ["-crf", "20", "-pix_fmt", "yuv420p"]


def encode_frames(
    pattern: str,
    rate: int,
    output: str,
    codec: str = "libx264",
) -> None:
    """Encode a numbered PNG sequence into a clip.

    Args:
        pattern: printf-style frame pattern (text_1_frame_%05d.png).
        rate: Input and output frame rate.
        output: Clip path.
        codec: "libx264" for CPU, "h264_nvenc" for GPU.

    Raises:
        subprocess.CalledProcessError: ffmpeg exited non-zero.
    """
    codec_name, codec_ffparams = _codec_params(codec)
    cmd = [
        _FFMPEG, "-y",
        "-framerate", str(rate),
        "-i", pattern,
        "-c:v", codec_name, *codec_ffparams,
        output,
    ]
    subprocess.run(cmd, check=True, capture_output=True)


def concat_file_list(file_list: str, output: str) -> None:
    """Stream-copy every entry of a concat-demuxer list into one file.

    Raises:
        subprocess.CalledProcessError: ffmpeg exited non-zero.
    """
    Path(output).parent.mkdir(parents=True, exist_ok=True)
    cmd = [
        _FFMPEG, "-y",
        "-f", "concat",
        "-safe", "0",
        "-i", file_list,
        "-c", "copy",
        output,
    ]
    subprocess.run(cmd, check=True, capture_output=True)


def probe_duration(path: str | Path) -> float:
    """Get video duration in seconds.

    imageio_ffmpeg does not bundle ffprobe, so moviepy reads the header.
    """
    with VideoFileClip(str(path)) as clip:
        return clip.duration
