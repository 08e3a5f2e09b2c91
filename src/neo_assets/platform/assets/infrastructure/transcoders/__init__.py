"""External media tool adapters."""

from .ffmpeg_transcoder import FFmpegTranscoder, create_ffmpeg_transcoder, parse_probe_output

__all__ = [
    "FFmpegTranscoder",
    "create_ffmpeg_transcoder",
    "parse_probe_output",
]
