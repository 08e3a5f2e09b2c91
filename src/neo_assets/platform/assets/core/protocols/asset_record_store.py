"""Asset record store protocol.

ONLY record persistence contract - the document database layer that owns
asset records. neo-assets calls back into it; it never implements it.
"""

from typing import Any, Dict, List, Optional

from typing_extensions import Protocol, runtime_checkable

from ..entities.asset_record import AssetRecord


@runtime_checkable
class AssetRecordStore(Protocol):
    """Asset record store protocol.

    Implementations serialize conflicting writes per record.
    """

    async def insert(self, record: AssetRecord) -> AssetRecord:
        """Persist a new record and return it with its assigned ``id``."""
        ...

    async def get(self, asset_id: str) -> Optional[AssetRecord]:
        """Fetch a record, or None if it doesn't exist."""
        ...

    async def update(self, asset_id: str, values: Dict[str, Any]) -> AssetRecord:
        """Apply field values to a record and return the updated record.

        Raises:
            AssetNotFound: If the record doesn't exist
        """
        ...

    async def delete(self, asset_id: str) -> Optional[AssetRecord]:
        """Delete a record and return what was deleted, or None if absent."""
        ...

    async def find_all(self) -> List[AssetRecord]:
        """Return every known record."""
        ...
