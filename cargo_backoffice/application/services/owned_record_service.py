"""Create/update orchestration shared by MAWB-owned records.

Every write runs inside one unit of work:

    begin -> existence check -> status lookup -> write -> commit

Leaving the ``async with`` block without committing rolls the unit back, so a
rejected existence check, a missing status, a storage failure, a timeout or a
cancellation all leave the database untouched. Exceptions propagate unchanged.

The service timeout covers the work up to and including ``commit()``; closing
the unit afterwards is outside it, so a committed write is never reported as
timed out.

Exclusivity per ``mawb_info_uuid`` does not rest on the existence check alone:
both parent tables carry a unique constraint on the owning key, and a
concurrent insert that slips past the check fails at flush and surfaces as
DuplicateEntityError from the repository.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from datetime import date
from typing import ClassVar, Generic

from cargo_backoffice.application.interfaces import UnitOfWork, UnitOfWorkFactory
from cargo_backoffice.application.interfaces.owned_record_repository import (
    ListItemT,
    OwnedRecordRepository,
    RecordT,
)
from cargo_backoffice.application.services.status_lookup import (
    resolve_default_status,
    resolve_named_status,
)
from cargo_backoffice.domain.entities import RecordType
from cargo_backoffice.domain.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    InvalidRequestError,
)

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10.0


class OwnedRecordService(ABC, Generic[RecordT, ListItemT]):
    """Orchestrates reads and transactional writes for one record type."""

    record_type: ClassVar[RecordType]
    entity_name: ClassVar[str]
    # Status names a caller may move a record to via ``transition``.
    transitions: ClassVar[frozenset[str]] = frozenset()

    def __init__(
        self,
        uow_factory: UnitOfWorkFactory,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self._uow_factory = uow_factory
        self._timeout = timeout

    @abstractmethod
    def _repository(self, uow: UnitOfWork) -> OwnedRecordRepository[RecordT, ListItemT]:
        """Pick this record type's repository from the unit of work."""
        ...

    @staticmethod
    def _require_key(mawb_info_uuid: str | None) -> str:
        key = (mawb_info_uuid or "").strip()
        if not key:
            raise InvalidRequestError("mawb info uuid is required")
        return key

    # ── Reads ────────────────────────────────────────────────────────

    async def get_by_owning_key(self, mawb_info_uuid: str) -> RecordT:
        key = self._require_key(mawb_info_uuid)
        async with self._uow_factory() as uow:
            async with asyncio.timeout(self._timeout):
                record = await self._repository(uow).get_by_owning_key(key)
        if record is None:
            raise EntityNotFoundError(self.entity_name, key, field="mawb_info_uuid")
        return record

    async def get_by_id(self, record_uuid: str) -> RecordT:
        async with self._uow_factory() as uow:
            async with asyncio.timeout(self._timeout):
                record = await self._repository(uow).get_by_id(record_uuid)
        if record is None:
            raise EntityNotFoundError(self.entity_name, record_uuid)
        return record

    async def get_all(
        self,
        *,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> list[ListItemT]:
        if start_date and end_date and start_date > end_date:
            raise InvalidRequestError("start_date must not be after end_date")
        async with self._uow_factory() as uow:
            async with asyncio.timeout(self._timeout):
                return await self._repository(uow).get_all(
                    start_date=start_date, end_date=end_date
                )

    # ── Writes ───────────────────────────────────────────────────────

    async def create(self, record: RecordT) -> RecordT:
        """Create the single record for a MAWB with the type's default status."""
        key = self._require_key(record.mawb_info_uuid)
        record.mawb_info_uuid = key

        async with self._uow_factory() as uow:
            async with asyncio.timeout(self._timeout):
                repository = self._repository(uow)
                existing = await repository.get_by_owning_key(key)
                if existing is not None:
                    logger.warning("%s already exists for MAWB %s", self.entity_name, key)
                    raise DuplicateEntityError(self.entity_name, "mawb_info_uuid", key)

                status = await resolve_default_status(uow.statuses, self.record_type.value)
                record.assign_status(status)

                result = await repository.insert(record)
                await uow.commit()

        logger.info("Created %s %s for MAWB %s", self.entity_name, result.uuid, key)
        return result

    async def update(self, record: RecordT) -> RecordT:
        """Overwrite the MAWB's record and its children; status goes back to the default.

        The target row is resolved from ``mawb_info_uuid``; any ``uuid`` on the
        incoming record is replaced.
        """
        key = self._require_key(record.mawb_info_uuid)
        record.mawb_info_uuid = key

        async with self._uow_factory() as uow:
            async with asyncio.timeout(self._timeout):
                repository = self._repository(uow)
                existing = await repository.get_by_owning_key(key)
                if existing is None:
                    logger.warning("%s not found for MAWB %s", self.entity_name, key)
                    raise EntityNotFoundError(self.entity_name, key, field="mawb_info_uuid")

                record.uuid = existing.uuid
                record.created_at = existing.created_at

                status = await resolve_default_status(uow.statuses, self.record_type.value)
                record.assign_status(status)

                result = await repository.replace(record)
                await uow.commit()

        logger.info("Updated %s %s for MAWB %s", self.entity_name, result.uuid, key)
        return result

    async def update_status(self, mawb_info_uuid: str, status_uuid: str) -> None:
        """Set the record's status; children are written back unchanged."""
        key = self._require_key(mawb_info_uuid)

        async with self._uow_factory() as uow:
            async with asyncio.timeout(self._timeout):
                repository = self._repository(uow)
                existing = await repository.get_by_owning_key(key)
                if existing is None:
                    raise EntityNotFoundError(self.entity_name, key, field="mawb_info_uuid")

                existing.status_uuid = status_uuid
                await repository.replace(existing)
                await uow.commit()

        logger.info("%s for MAWB %s moved to status %s", self.entity_name, key, status_uuid)

    async def transition(self, mawb_info_uuid: str, status_name: str) -> None:
        """Move the record to a named catalog status of this record type."""
        if status_name not in self.transitions:
            raise InvalidRequestError(
                f"invalid status '{status_name}' for {self.record_type.value}"
            )
        key = self._require_key(mawb_info_uuid)

        async with self._uow_factory() as uow:
            async with asyncio.timeout(self._timeout):
                repository = self._repository(uow)
                existing = await repository.get_by_owning_key(key)
                if existing is None:
                    raise EntityNotFoundError(self.entity_name, key, field="mawb_info_uuid")

                status = await resolve_named_status(
                    uow.statuses, status_name, self.record_type.value
                )
                existing.assign_status(status)
                await repository.replace(existing)
                await uow.commit()

        logger.info("%s for MAWB %s moved to %s", self.entity_name, key, status_name)
