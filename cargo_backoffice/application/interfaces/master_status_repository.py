"""Abstract repository interface (port) for the status catalog."""

from abc import ABC, abstractmethod

from cargo_backoffice.domain.entities import MasterStatus


class MasterStatusRepository(ABC):
    """Port for status catalog persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_uuid(self, status_uuid: str) -> MasterStatus | None:
        ...

    @abstractmethod
    async def get_all(self, *, status_type: str | None = None) -> list[MasterStatus]:
        """List catalog entries, optionally restricted to one record type."""
        ...

    @abstractmethod
    async def get_default_by_type(self, status_type: str) -> MasterStatus | None:
        """Return the default entry for a record type, or None when none is configured."""
        ...

    @abstractmethod
    async def get_by_name_and_type(self, name: str, status_type: str) -> MasterStatus | None:
        ...

    @abstractmethod
    async def create(self, status: MasterStatus) -> MasterStatus:
        ...

    @abstractmethod
    async def update(self, status: MasterStatus) -> MasterStatus:
        ...

    @abstractmethod
    async def delete(self, status_uuid: str) -> bool:
        """Delete an entry. Returns True if deleted, False if not found."""
        ...

    @abstractmethod
    async def clear_default(self, status_type: str, *, keep_uuid: str | None = None) -> None:
        """Unset ``is_default`` on every entry of the type except ``keep_uuid``."""
        ...
