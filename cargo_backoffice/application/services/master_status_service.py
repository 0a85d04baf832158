"""Application service (use case) for the status catalog."""

import asyncio
import logging

from cargo_backoffice.application.interfaces import UnitOfWorkFactory
from cargo_backoffice.application.schemas.master_status import MasterStatusCreate, MasterStatusUpdate
from cargo_backoffice.application.services.owned_record_service import DEFAULT_TIMEOUT_SECONDS
from cargo_backoffice.application.services.status_lookup import resolve_default_status
from cargo_backoffice.domain.entities import MasterStatus
from cargo_backoffice.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


class MasterStatusService:
    """Manages catalog entries. Keeps at most one default entry per record type."""

    def __init__(
        self,
        uow_factory: UnitOfWorkFactory,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self._uow_factory = uow_factory
        self._timeout = timeout

    async def list_statuses(self, status_type: str | None = None) -> list[MasterStatus]:
        async with self._uow_factory() as uow:
            async with asyncio.timeout(self._timeout):
                return await uow.statuses.get_all(status_type=status_type)

    async def get_status(self, status_uuid: str) -> MasterStatus:
        async with self._uow_factory() as uow:
            async with asyncio.timeout(self._timeout):
                status = await uow.statuses.get_by_uuid(status_uuid)
        if status is None:
            raise EntityNotFoundError("MasterStatus", status_uuid, field="uuid")
        return status

    async def get_default_status(self, status_type: str) -> MasterStatus:
        """Raises ConfigurationError when no default is configured for the type."""
        async with self._uow_factory() as uow:
            async with asyncio.timeout(self._timeout):
                return await resolve_default_status(uow.statuses, status_type)

    async def get_status_by_name_and_type(self, name: str, status_type: str) -> MasterStatus:
        async with self._uow_factory() as uow:
            async with asyncio.timeout(self._timeout):
                status = await uow.statuses.get_by_name_and_type(name, status_type)
        if status is None:
            raise EntityNotFoundError("MasterStatus", f"{status_type}/{name}", field="type/name")
        return status

    async def create_status(self, data: MasterStatusCreate) -> MasterStatus:
        status = MasterStatus(name=data.name, type=data.type, is_default=data.is_default)
        async with self._uow_factory() as uow:
            async with asyncio.timeout(self._timeout):
                if status.is_default:
                    await uow.statuses.clear_default(status.type)
                created = await uow.statuses.create(status)
                await uow.commit()
        logger.info("Created status '%s' for %s (default=%s)", created.name, created.type, created.is_default)
        return created

    async def update_status(self, status_uuid: str, data: MasterStatusUpdate) -> MasterStatus:
        async with self._uow_factory() as uow:
            async with asyncio.timeout(self._timeout):
                status = await uow.statuses.get_by_uuid(status_uuid)
                if status is None:
                    raise EntityNotFoundError("MasterStatus", status_uuid, field="uuid")

                status.update(name=data.name, type=data.type, is_default=data.is_default)
                if status.is_default:
                    await uow.statuses.clear_default(status.type, keep_uuid=status.uuid)
                updated = await uow.statuses.update(status)
                await uow.commit()
        logger.info("Updated status %s", status_uuid)
        return updated

    async def delete_status(self, status_uuid: str) -> bool:
        async with self._uow_factory() as uow:
            async with asyncio.timeout(self._timeout):
                deleted = await uow.statuses.delete(status_uuid)
                if not deleted:
                    raise EntityNotFoundError("MasterStatus", status_uuid, field="uuid")
                await uow.commit()
        logger.info("Deleted status %s", status_uuid)
        return deleted
