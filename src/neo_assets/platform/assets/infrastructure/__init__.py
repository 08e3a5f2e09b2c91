"""Asset platform infrastructure.

Concrete repositories, path resolution, scratch files and the ffmpeg
transcoder.
"""

from .paths import PathResolver, resolve_path
from .repositories import LocalFilesystemRepository, create_local_repository
from .temp_files import materialized, scratch_path
from .transcoders import FFmpegTranscoder, create_ffmpeg_transcoder, parse_probe_output

__all__ = [
    "PathResolver",
    "resolve_path",
    "LocalFilesystemRepository",
    "create_local_repository",
    "materialized",
    "scratch_path",
    "FFmpegTranscoder",
    "create_ffmpeg_transcoder",
    "parse_probe_output",
]
