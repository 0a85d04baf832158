"""Shared shape of records owned by a single MAWB (one record per owning key)."""

from dataclasses import dataclass
from datetime import datetime

from cargo_backoffice.domain.entities.master_status import MasterStatus


@dataclass
class OwnedRecord:
    """Parent record keyed by ``mawb_info_uuid``.

    ``uuid``, ``created_at`` and ``updated_at`` are assigned by the store;
    ``status`` is the display name joined from the status catalog.
    """

    mawb_info_uuid: str = ""
    uuid: str | None = None
    status_uuid: str | None = None
    status: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def assign_status(self, status: MasterStatus) -> None:
        self.status_uuid = status.uuid
        self.status = status.name
