"""Generic SQLAlchemy store for a MAWB-owned parent row and its child rows.

Subclasses bind the parent/child ORM models and supply the entity mapping;
the query shapes are shared:

- reads outer-join ``master_status`` for the status display name and load
  children ordered by id,
- ``insert`` assigns identity and timestamps, writes the parent then the
  children, and re-reads the aggregate,
- ``replace`` updates the parent by primary key, deletes every child of the
  parent and inserts the supplied set, then re-reads the aggregate.
"""

from abc import abstractmethod
from datetime import date, datetime, time, timedelta, timezone
from typing import Any, ClassVar, Generic
from uuid import uuid4
from zoneinfo import ZoneInfo

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from cargo_backoffice.application.interfaces.owned_record_repository import ListItemT, RecordT
from cargo_backoffice.domain.exceptions import DuplicateEntityError, EntityNotFoundError, StorageError
from cargo_backoffice.infrastructure.database.models import MasterStatusModel
from cargo_backoffice.infrastructure.database.repositories.errors import storage_errors

DEFAULT_REPORT_TIMEZONE = "Asia/Bangkok"
FALLBACK_STATUS_NAME = "Draft"


class SQLAlchemyOwnedRecordRepository(Generic[RecordT, ListItemT]):
    """Shared implementation of the OwnedRecordRepository port."""

    parent_model: ClassVar[type]
    child_model: ClassVar[type]
    # Attribute on the child model holding the parent uuid
    child_key: ClassVar[str]
    # Attribute on the domain entity holding the child list
    children_attr: ClassVar[str]
    unique_constraint: ClassVar[str]
    entity_name: ClassVar[str]

    def __init__(self, session: AsyncSession, report_timezone: str = DEFAULT_REPORT_TIMEZONE):
        self._session = session
        self._report_tz = ZoneInfo(report_timezone)

    # ── Mapping hooks ────────────────────────────────────────────────

    @abstractmethod
    def _to_entity(self, model: Any, status_name: str | None, children: list[Any]) -> RecordT:
        """Map parent + child ORM rows → domain aggregate."""
        ...

    @abstractmethod
    def _to_list_item(self, model: Any, status_name: str | None) -> ListItemT:
        ...

    @abstractmethod
    def _parent_values(self, record: RecordT) -> dict[str, Any]:
        """Column values of the parent, excluding identity and timestamps."""
        ...

    @abstractmethod
    def _child_values(self, child: Any) -> dict[str, Any]:
        """Column values of one child, excluding its id and parent key."""
        ...

    # ── Helpers ──────────────────────────────────────────────────────

    @property
    def _table(self) -> str:
        return self.parent_model.__tablename__

    def _operation(self, name: str) -> str:
        return f"{self._table}.{name}"

    def _child_fk(self):
        return getattr(self.child_model, self.child_key)

    def _day_start_utc(self, day: date) -> datetime:
        """Midnight of ``day`` in the report timezone, expressed in UTC."""
        return datetime.combine(day, time.min, tzinfo=self._report_tz).astimezone(timezone.utc)

    def _with_status(self):
        return select(self.parent_model, MasterStatusModel.name).outerjoin(
            MasterStatusModel, MasterStatusModel.uuid == self.parent_model.status_uuid
        )

    async def _fetch_one(self, criterion, operation: str) -> RecordT | None:
        with storage_errors(self._operation(operation)):
            result = await self._session.execute(self._with_status().where(criterion))
            row = result.first()
            if row is None:
                return None
            model, status_name = row
            children = await self._session.execute(
                select(self.child_model)
                .where(self._child_fk() == model.uuid)
                .order_by(self.child_model.id)
            )
        return self._to_entity(model, status_name, list(children.scalars().all()))

    def _add_children(self, record: RecordT) -> None:
        for child in getattr(record, self.children_attr):
            values = self._child_values(child)
            values[self.child_key] = record.uuid
            self._session.add(self.child_model(**values))

    async def _flush(self, record: RecordT, operation: str) -> None:
        try:
            await self._session.flush()
        except IntegrityError as exc:
            message = str(exc.orig)
            if (
                self.unique_constraint in message
                or f"{self._table}.mawb_info_uuid" in message
            ):
                raise DuplicateEntityError(
                    self.entity_name, "mawb_info_uuid", record.mawb_info_uuid
                ) from exc
            raise StorageError(self._operation(operation), message) from exc

    async def _refetch(self, record: RecordT, operation: str) -> RecordT:
        fresh = await self._fetch_one(self.parent_model.uuid == record.uuid, operation)
        if fresh is None:
            raise StorageError(self._operation(operation), f"record {record.uuid} vanished after write")
        return fresh

    # ── Port implementation ──────────────────────────────────────────

    async def get_by_owning_key(self, mawb_info_uuid: str) -> RecordT | None:
        return await self._fetch_one(
            self.parent_model.mawb_info_uuid == mawb_info_uuid, "get_by_owning_key"
        )

    async def get_by_id(self, record_uuid: str) -> RecordT | None:
        return await self._fetch_one(self.parent_model.uuid == record_uuid, "get_by_id")

    async def insert(self, record: RecordT) -> RecordT:
        now = datetime.now(timezone.utc)
        record.uuid = str(uuid4())
        record.created_at = now
        record.updated_at = now

        with storage_errors(self._operation("insert")):
            self._session.add(
                self.parent_model(
                    uuid=record.uuid,
                    created_at=now,
                    updated_at=now,
                    **self._parent_values(record),
                )
            )
            await self._flush(record, "insert")
            self._add_children(record)
            await self._flush(record, "insert")

        return await self._refetch(record, "insert")

    async def replace(self, record: RecordT) -> RecordT:
        now = datetime.now(timezone.utc)

        with storage_errors(self._operation("replace")):
            model = await self._session.get(self.parent_model, record.uuid)
            if model is None:
                raise EntityNotFoundError(self.entity_name, record.uuid)
            for key, value in self._parent_values(record).items():
                setattr(model, key, value)
            model.updated_at = now
            record.updated_at = now

            await self._session.execute(
                delete(self.child_model)
                .where(self._child_fk() == record.uuid)
                .execution_options(synchronize_session="fetch")
            )
            self._add_children(record)
            await self._flush(record, "replace")

        return await self._refetch(record, "replace")

    async def get_all(
        self,
        *,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> list[ListItemT]:
        stmt = self._with_status()
        if start_date is not None:
            stmt = stmt.where(self.parent_model.created_at >= self._day_start_utc(start_date))
        if end_date is not None:
            stmt = stmt.where(
                self.parent_model.created_at < self._day_start_utc(end_date + timedelta(days=1))
            )
        stmt = stmt.order_by(self.parent_model.created_at.desc())

        with storage_errors(self._operation("get_all")):
            result = await self._session.execute(stmt)
        return [self._to_list_item(model, status_name) for model, status_name in result.all()]
