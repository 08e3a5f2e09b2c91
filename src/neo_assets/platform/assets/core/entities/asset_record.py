"""Asset record entity.

ONLY asset record - the persisted description of an asset as the lifecycle
manager sees it, plus the lifecycle state it is in.
"""

from dataclasses import dataclass, field, fields, replace
from enum import Enum
from typing import Any, Dict, Optional

from ..value_objects.mime_type import MimeType


class AssetState(Enum):
    """Lifecycle state of an asset."""
    UNCOMMITTED = "uncommitted"
    STORED = "stored"
    THUMBNAILED = "thumbnailed"
    NO_THUMBNAIL = "no_thumbnail"
    ACTIVE = "active"
    DELETED = "deleted"


# Fields the lifecycle manager derives; never taken from caller input
PROTECTED_FIELDS = frozenset({
    "id",
    "path",
    "repository_name",
    "type",
    "subtype",
    "size_bytes",
    "has_thumbnail",
    "resolution",
    "duration_seconds",
})


@dataclass
class AssetRecord:
    """Asset record entity.

    The persistence collaborator owns the record; the lifecycle manager
    only fills in the derived fields. ``path`` is always
    ``<id>.<extension>`` once assigned.
    """

    id: Optional[str] = None
    repository_name: Optional[str] = None
    path: Optional[str] = None
    type: Optional[str] = None
    subtype: Optional[str] = None
    size_bytes: int = 0
    has_thumbnail: bool = False
    resolution: Optional[str] = None
    duration_seconds: Optional[float] = None
    attributes: Dict[str, Any] = field(default_factory=dict)

    # Not persisted
    state: AssetState = field(default=AssetState.UNCOMMITTED, compare=False)

    @property
    def mime_type(self) -> Optional[MimeType]:
        if not self.type or not self.subtype:
            return None
        return MimeType.from_parts(self.type, self.subtype)

    @property
    def content_type(self) -> str:
        return f"{self.type}/{self.subtype}"

    @property
    def is_committed(self) -> bool:
        return self.id is not None and self.path is not None

    def transition(self, state: AssetState) -> "AssetRecord":
        self.state = state
        return self

    def apply(self, values: Dict[str, Any]) -> "AssetRecord":
        """Apply a dict of field values in place; unknown keys land in ``attributes``."""
        known = {f.name for f in fields(self) if f.name != "state"}
        for key, value in values.items():
            if key in known:
                setattr(self, key, value)
            else:
                self.attributes[key] = value
        return self

    def copy(self) -> "AssetRecord":
        return replace(self, attributes=dict(self.attributes))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the dict handed to the persistence collaborator."""
        return {
            "id": self.id,
            "repository_name": self.repository_name,
            "path": self.path,
            "type": self.type,
            "subtype": self.subtype,
            "size_bytes": self.size_bytes,
            "has_thumbnail": self.has_thumbnail,
            "resolution": self.resolution,
            "duration_seconds": self.duration_seconds,
            "attributes": dict(self.attributes),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AssetRecord":
        """Create a record from persisted data."""
        data = dict(data)
        attributes = dict(data.pop("attributes", None) or {})
        record = cls(attributes=attributes)
        record.apply(data)
        record.state = AssetState.ACTIVE if record.is_committed else AssetState.UNCOMMITTED
        return record


def strip_protected_fields(values: Dict[str, Any]) -> Dict[str, Any]:
    """Drop derived fields (``path`` included) from caller-supplied input."""
    return {key: value for key, value in values.items() if key not in PROTECTED_FIELDS}
