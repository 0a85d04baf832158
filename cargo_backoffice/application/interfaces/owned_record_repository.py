"""Abstract repository interface (port) shared by MAWB-owned record stores.

A store persists one parent row per owning key (``mawb_info_uuid``) plus the
parent's wholly owned child rows.
"""

from abc import ABC, abstractmethod
from datetime import date
from typing import Generic, TypeVar

from cargo_backoffice.domain.entities import OwnedRecord

RecordT = TypeVar("RecordT", bound=OwnedRecord)
ListItemT = TypeVar("ListItemT")


class OwnedRecordRepository(ABC, Generic[RecordT, ListItemT]):
    """Port for parent + children persistence keyed by MAWB."""

    @abstractmethod
    async def get_by_owning_key(self, mawb_info_uuid: str) -> RecordT | None:
        """Load the full aggregate for a MAWB; None means it has not been created yet."""
        ...

    @abstractmethod
    async def get_by_id(self, record_uuid: str) -> RecordT | None:
        ...

    @abstractmethod
    async def insert(self, record: RecordT) -> RecordT:
        """Insert parent and children; identity and timestamps are assigned here.

        Returns the re-read aggregate, including the joined status name.
        """
        ...

    @abstractmethod
    async def replace(self, record: RecordT) -> RecordT:
        """Update the parent by primary key and swap the full child set.

        Returns the re-read aggregate.
        """
        ...

    @abstractmethod
    async def get_all(
        self,
        *,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> list[ListItemT]:
        """List rows newest first, optionally bounded by creation date (inclusive)."""
        ...
