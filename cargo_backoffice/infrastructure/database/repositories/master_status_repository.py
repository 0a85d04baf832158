"""Concrete repository implementation for the status catalog backed by SQLAlchemy."""

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from cargo_backoffice.application.interfaces import MasterStatusRepository
from cargo_backoffice.domain.entities import MasterStatus
from cargo_backoffice.infrastructure.database.models import MasterStatusModel
from cargo_backoffice.infrastructure.database.repositories.errors import storage_errors


class SQLAlchemyMasterStatusRepository(MasterStatusRepository):
    """Implements the MasterStatusRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: MasterStatusModel) -> MasterStatus:
        """Map ORM model → domain entity."""
        return MasterStatus(
            uuid=model.uuid,
            name=model.name,
            type=model.type,
            is_default=model.is_default,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    async def get_by_uuid(self, status_uuid: str) -> MasterStatus | None:
        with storage_errors("master_status.get_by_uuid"):
            model = await self._session.get(MasterStatusModel, status_uuid)
        return self._to_entity(model) if model else None

    async def get_all(self, *, status_type: str | None = None) -> list[MasterStatus]:
        stmt = select(MasterStatusModel)
        if status_type is not None:
            stmt = stmt.where(MasterStatusModel.type == status_type)
        stmt = stmt.order_by(MasterStatusModel.type, MasterStatusModel.created_at)
        with storage_errors("master_status.get_all"):
            result = await self._session.execute(stmt)
        return [self._to_entity(m) for m in result.scalars().all()]

    async def get_default_by_type(self, status_type: str) -> MasterStatus | None:
        stmt = (
            select(MasterStatusModel)
            .where(
                MasterStatusModel.type == status_type,
                MasterStatusModel.is_default.is_(True),
            )
            .order_by(MasterStatusModel.created_at, MasterStatusModel.uuid)
            .limit(1)
        )
        with storage_errors("master_status.get_default_by_type"):
            result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_by_name_and_type(self, name: str, status_type: str) -> MasterStatus | None:
        stmt = (
            select(MasterStatusModel)
            .where(
                MasterStatusModel.name == name,
                MasterStatusModel.type == status_type,
            )
            .order_by(MasterStatusModel.created_at, MasterStatusModel.uuid)
            .limit(1)
        )
        with storage_errors("master_status.get_by_name_and_type"):
            result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def create(self, status: MasterStatus) -> MasterStatus:
        model = MasterStatusModel(
            uuid=status.uuid,
            name=status.name,
            type=status.type,
            is_default=status.is_default,
            created_at=status.created_at,
            updated_at=status.updated_at,
        )
        with storage_errors("master_status.create"):
            self._session.add(model)
            await self._session.flush()
        return self._to_entity(model)

    async def update(self, status: MasterStatus) -> MasterStatus:
        with storage_errors("master_status.update"):
            model = await self._session.get(MasterStatusModel, status.uuid)
            if model is None:
                raise ValueError(f"MasterStatus {status.uuid} not found in database")
            model.name = status.name
            model.type = status.type
            model.is_default = status.is_default
            model.updated_at = status.updated_at
            await self._session.flush()
        return self._to_entity(model)

    async def delete(self, status_uuid: str) -> bool:
        with storage_errors("master_status.delete"):
            model = await self._session.get(MasterStatusModel, status_uuid)
            if model is None:
                return False
            await self._session.delete(model)
            await self._session.flush()
        return True

    async def clear_default(self, status_type: str, *, keep_uuid: str | None = None) -> None:
        stmt = update(MasterStatusModel).where(
            MasterStatusModel.type == status_type,
            MasterStatusModel.is_default.is_(True),
        )
        if keep_uuid is not None:
            stmt = stmt.where(MasterStatusModel.uuid != keep_uuid)
        with storage_errors("master_status.clear_default"):
            await self._session.execute(
                stmt.values(is_default=False).execution_options(synchronize_session="fetch")
            )
