"""FFmpeg transcoder.

ONLY ffmpeg/ffprobe orchestration - probes media metadata and renders
thumbnails by driving the external binaries as subprocesses. Sources are
materialized to scratch files first since the tools need seekable input.
"""

import asyncio
import json
import logging
import os
import shlex
from typing import Any, AsyncIterable, Dict, List, Optional, Tuple, Union

import aiofiles.os

from .....config.settings import AssetSettings, get_settings
from ...core.entities.media_metadata import MediaMetadata
from ...core.exceptions import ThumbnailGenerationFailed, TranscoderError
from ...core.value_objects.mime_type import MimeType
from ..temp_files import materialized

logger = logging.getLogger(__name__)


def _to_int(value: Any) -> Optional[int]:
    try:
        number = int(value)
    except (TypeError, ValueError):
        return None
    return number if number > 0 else None


def _to_float(value: Any) -> Optional[float]:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if number > 0 else None


def parse_probe_output(payload: Union[str, bytes, Dict[str, Any]]) -> MediaMetadata:
    """Build metadata from ``ffprobe -print_format json`` output.

    Resolution comes from the first stream that reports dimensions.
    Duration and size prefer the container (format) values and fall back
    to the first stream that has them.

    Raises:
        TranscoderError: If the payload is not a valid JSON object
    """
    if isinstance(payload, (str, bytes)):
        try:
            data = json.loads(payload or "{}")
        except ValueError as e:
            raise TranscoderError(f"Unreadable ffprobe output: {e}") from e
    else:
        data = payload
    if not isinstance(data, dict):
        raise TranscoderError(f"Unexpected ffprobe output: {type(data).__name__}")

    streams: List[Dict[str, Any]] = data.get("streams") or []
    fmt: Dict[str, Any] = data.get("format") or {}

    width = height = None
    for stream in streams:
        width, height = _to_int(stream.get("width")), _to_int(stream.get("height"))
        if width and height:
            break
    else:
        width = height = None

    duration = _to_float(fmt.get("duration"))
    if duration is None:
        duration = next(
            (d for d in (_to_float(s.get("duration")) for s in streams) if d is not None),
            None
        )

    return MediaMetadata(
        width=width,
        height=height,
        duration_seconds=duration,
        size_bytes=_to_int(fmt.get("size")),
    )


class FFmpegTranscoder:
    """Transcoder backed by the ffmpeg and ffprobe binaries."""

    def __init__(self, settings: Optional[AssetSettings] = None):
        settings = settings or get_settings()
        self.ffmpeg = settings.ffmpeg_binary
        self.ffprobe = settings.ffprobe_binary
        self.timeout_seconds = settings.transcoder_timeout_seconds
        self.scratch_dir = settings.scratch_directory
        self.video_thumbnail_position = settings.video_thumbnail_position

    async def _run(self, cmd: List[str]) -> Tuple[bytes, bytes]:
        """Run a command; raise TranscoderError on failure or timeout."""
        logger.debug(f"Running {' '.join(shlex.quote(c) for c in cmd)}")
        try:
            process = await asyncio.create_subprocess_exec(
                *cmd,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            raise TranscoderError(f"Failed to start {cmd[0]}: {e}", command=cmd) from e

        try:
            stdout, stderr = await asyncio.wait_for(
                process.communicate(), timeout=self.timeout_seconds
            )
        except asyncio.TimeoutError:
            process.kill()
            await process.wait()
            raise TranscoderError(
                f"{cmd[0]} timed out after {self.timeout_seconds}s",
                command=cmd,
                timed_out=True,
            )

        if process.returncode != 0:
            stderr_text = stderr.decode("utf-8", errors="replace")
            raise TranscoderError(
                f"{cmd[0]} exited with code {process.returncode}",
                command=cmd,
                return_code=process.returncode,
                stderr=stderr_text,
            )
        return stdout, stderr

    async def probe_file(self, path: str) -> MediaMetadata:
        cmd = [
            self.ffprobe,
            "-v", "error",
            "-print_format", "json",
            "-show_format",
            "-show_streams",
            path,
        ]
        stdout, _ = await self._run(cmd)
        return parse_probe_output(stdout)

    async def probe(
        self,
        source: AsyncIterable[bytes],
        asset_id: Optional[str] = None
    ) -> MediaMetadata:
        async with materialized(source, self.scratch_dir) as path:
            metadata = await self.probe_file(path)
        logger.debug(f"Probed asset {asset_id}: {metadata}")
        return metadata

    def thumbnail_command(
        self,
        source_path: str,
        destination_path: str,
        target_width: int,
        seek_seconds: Optional[float] = None
    ) -> List[str]:
        cmd = [self.ffmpeg, "-y", "-v", "error"]
        if seek_seconds:
            cmd += ["-ss", f"{seek_seconds:.3f}"]
        cmd += [
            "-i", source_path,
            "-frames:v", "1",
            "-vf", f"scale={target_width}:-1",
            destination_path,
        ]
        return cmd

    async def _seek_position(self, source_path: str, asset_id: Optional[str]) -> float:
        try:
            metadata = await self.probe_file(source_path)
        except TranscoderError as e:
            logger.warning(f"Could not read duration of asset {asset_id}, using first frame: {e}")
            return 0.0
        if not metadata.duration_seconds:
            return 0.0
        return metadata.duration_seconds * self.video_thumbnail_position

    async def generate_thumbnail(
        self,
        source: AsyncIterable[bytes],
        destination_path: str,
        target_width: int,
        media_type: MimeType,
        asset_id: Optional[str] = None
    ) -> None:
        if target_width <= 0:
            raise ValueError(f"target_width must be positive, got {target_width}")

        suffix = f".{media_type.file_extension()}"
        try:
            async with materialized(source, self.scratch_dir, suffix) as source_path:
                seek = None
                if media_type.is_video():
                    seek = await self._seek_position(source_path, asset_id)
                await aiofiles.os.makedirs(os.path.dirname(destination_path) or ".", exist_ok=True)
                await self._run(
                    self.thumbnail_command(source_path, destination_path, target_width, seek)
                )
        except TranscoderError as e:
            raise ThumbnailGenerationFailed(asset_id, e) from e

        logger.debug(f"Rendered thumbnail for asset {asset_id} at {destination_path}")

    def __repr__(self) -> str:
        return f"FFmpegTranscoder(ffmpeg='{self.ffmpeg}', ffprobe='{self.ffprobe}')"


def create_ffmpeg_transcoder(settings: Optional[AssetSettings] = None) -> FFmpegTranscoder:
    """Create ffmpeg transcoder."""
    return FFmpegTranscoder(settings)
