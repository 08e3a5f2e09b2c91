"""MIME type value object.

ONLY MIME type - represents a validated ``type/subtype`` pair with the
media categorization the asset lifecycle relies on (thumbnail support,
vector detection, storage extension).
"""

import os
import re
from dataclasses import dataclass
from typing import Dict, Optional


# MIME type validation pattern (RFC 6838 restricted-name characters)
MIME_PATTERN = re.compile(
    r"^([a-z0-9][a-z0-9!#$&^_.+-]*)"  # type
    r"/"
    r"([a-z0-9][a-z0-9!#$&^_.+-]*)"  # subtype
    r"(;.*)?$"  # optional parameters
)

# Media types the external tool can render a still image from
THUMBNAIL_MAIN_TYPES = frozenset({"image", "video"})

# Vector image subtypes; rendering these at a fixed width is pointless
VECTOR_SUBTYPES = frozenset({"svg+xml"})

# Subtypes stored under a different extension than the subtype itself
EXTENSION_OVERRIDES: Dict[str, str] = {
    "svg+xml": "svg",
}


@dataclass(frozen=True)
class MimeType:
    """MIME type value object.

    Normalized to lowercase with parameters stripped, so
    ``MimeType("Image/PNG; charset=binary").value == "image/png"``.
    """

    value: str

    def __post_init__(self):
        """Validate and normalize MIME type."""
        if not isinstance(self.value, str):
            raise ValueError(f"MimeType must be a string, got {type(self.value).__name__}")

        normalized = self.value.strip().lower()
        if not normalized:
            raise ValueError("MIME type cannot be empty")

        if not MIME_PATTERN.match(normalized):
            raise ValueError(f"Invalid MIME type format: {self.value}")

        base = normalized.split(";", 1)[0].strip()
        object.__setattr__(self, "value", base)

    @property
    def main_type(self) -> str:
        """The main type part (e.g. 'image' from 'image/png')."""
        return self.value.split("/", 1)[0]

    @property
    def sub_type(self) -> str:
        """The subtype part (e.g. 'png' from 'image/png')."""
        return self.value.split("/", 1)[1]

    def is_image(self) -> bool:
        return self.main_type == "image"

    def is_video(self) -> bool:
        return self.main_type == "video"

    def is_audio(self) -> bool:
        return self.main_type == "audio"

    def is_media(self) -> bool:
        """Check if this is any media type the prober understands."""
        return self.is_image() or self.is_video() or self.is_audio()

    def is_vector(self) -> bool:
        return self.sub_type in VECTOR_SUBTYPES

    def supports_thumbnail(self) -> bool:
        """Raster images and videos get a thumbnail; vectors and everything else do not."""
        return self.main_type in THUMBNAIL_MAIN_TYPES and not self.is_vector()

    def file_extension(self, original_filename: Optional[str] = None) -> str:
        """Get the storage extension (without dot) for this type.

        SVG uploads keep an original ``.svg*`` extension (e.g. ``.svgz``)
        when the client sent one; every other type is stored under its
        subtype.
        """
        if self.sub_type == "svg+xml":
            original_ext = os.path.splitext(original_filename or "")[1].lower()
            if re.fullmatch(r"\.svg[a-z0-9]*", original_ext):
                return original_ext[1:]
        return EXTENSION_OVERRIDES.get(self.sub_type, self.sub_type)

    def matches(self, pattern: str) -> bool:
        """Check against an accepted-type pattern such as ``image/*`` or ``*/*``."""
        pattern = pattern.strip().lower()
        if pattern in ("*", "*/*"):
            return True
        if pattern.endswith("/*"):
            return self.main_type == pattern[:-2]
        return self.value == pattern

    @classmethod
    def from_parts(cls, main_type: str, sub_type: str) -> "MimeType":
        return cls(f"{main_type}/{sub_type}")

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"MimeType('{self.value}')"
