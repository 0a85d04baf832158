"""SQLAlchemy implementation of the UnitOfWork port.

One AsyncSession per unit. The session autobegins on first use, every
repository shares it, and ``__aexit__`` rolls back whatever was not
committed before closing it.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from cargo_backoffice.application.interfaces import UnitOfWork
from cargo_backoffice.domain.exceptions import StorageError
from cargo_backoffice.infrastructure.database.repositories import (
    SQLAlchemyCargoManifestRepository,
    SQLAlchemyMasterStatusRepository,
    SQLAlchemyWeightSlipRepository,
)
from cargo_backoffice.infrastructure.database.repositories.owned_record_repository import (
    DEFAULT_REPORT_TIMEZONE,
)

logger = logging.getLogger(__name__)


class SQLAlchemyUnitOfWork(UnitOfWork):
    """Transaction boundary over a single AsyncSession."""

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        report_timezone: str = DEFAULT_REPORT_TIMEZONE,
    ):
        self._session_factory = session_factory
        self._report_timezone = report_timezone
        self._session: AsyncSession | None = None
        self._committed = False

    async def __aenter__(self) -> "SQLAlchemyUnitOfWork":
        self._session = self._session_factory()
        self._committed = False
        self.statuses = SQLAlchemyMasterStatusRepository(self._session)
        self.cargo_manifests = SQLAlchemyCargoManifestRepository(
            self._session, self._report_timezone
        )
        self.weight_slips = SQLAlchemyWeightSlipRepository(
            self._session, self._report_timezone
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        try:
            if not self._committed:
                if exc_type is not None:
                    logger.debug("Rolling back unit of work after %s", exc_type.__name__)
                await self.rollback()
        finally:
            await self._session.close()
            self._session = None

    async def commit(self) -> None:
        try:
            await self._session.commit()
        except SQLAlchemyError as exc:
            raise StorageError("transaction.commit", str(getattr(exc, "orig", None) or exc)) from exc
        self._committed = True

    async def rollback(self) -> None:
        if self._committed or self._session is None:
            return
        await self._session.rollback()
