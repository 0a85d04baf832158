"""Domain entity for the status catalog: workflow states per record type."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import uuid4


class RecordType(str, Enum):
    """Record types that carry a catalog status."""

    CARGO_MANIFEST = "cargo_manifest"
    WEIGHT_SLIP = "weight_slip"


@dataclass
class MasterStatus:
    """A status catalog entry.

    Exactly one entry per ``type`` is expected to carry ``is_default=True``;
    that entry is assigned to every freshly created or updated record of the type.
    """

    name: str
    type: str
    is_default: bool = False
    uuid: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def update(
        self,
        name: str | None = None,
        type: str | None = None,
        is_default: bool | None = None,
    ) -> None:
        """Update mutable fields and refresh the updated_at timestamp."""
        if name is not None:
            self.name = name
        if type is not None:
            self.type = type
        if is_default is not None:
            self.is_default = is_default
        self.updated_at = datetime.now(timezone.utc)
