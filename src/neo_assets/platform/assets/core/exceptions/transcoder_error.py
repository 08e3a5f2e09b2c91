"""Transcoder error for the asset platform.

ONLY external tool failures - raised when ffmpeg/ffprobe exits with an
error, cannot be started, produces unreadable output or times out.
"""

from typing import Any, Dict, List, Optional, Sequence

from .....core.exceptions import ExternalToolError

STDERR_TAIL_CHARS = 2000


class TranscoderError(ExternalToolError):
    """Raised when the external media tool fails."""

    def __init__(
        self,
        message: str,
        command: Optional[Sequence[str]] = None,
        return_code: Optional[int] = None,
        stderr: Optional[str] = None,
        timed_out: bool = False,
        details: Optional[Dict[str, Any]] = None
    ):
        enhanced_details = details or {}
        command_list: List[str] = list(command or [])
        if command_list:
            enhanced_details["command"] = command_list
        if return_code is not None:
            enhanced_details["return_code"] = return_code
        if stderr:
            enhanced_details["stderr"] = stderr[-STDERR_TAIL_CHARS:]
        if timed_out:
            enhanced_details["timed_out"] = True

        super().__init__(
            message=message,
            error_code="TRANSCODER_FAILED",
            details=enhanced_details
        )
        self.command = command_list
        self.return_code = return_code
        self.stderr = stderr
        self.timed_out = timed_out
