"""SQLite-backed fixtures for exercising the SQLAlchemy repositories end to end."""

from datetime import datetime, timezone

import pytest
import pytest_asyncio
from sqlalchemy.pool import StaticPool

from cargo_backoffice.domain.entities import MasterStatus, RecordType
from cargo_backoffice.infrastructure.database import (
    Base,
    SQLAlchemyUnitOfWork,
    build_engine,
    build_session_factory,
)
from cargo_backoffice.infrastructure.database.models import MasterStatusModel


def _status(name: str, status_type: RecordType, is_default: bool = False) -> MasterStatusModel:
    status = MasterStatus(name=name, type=status_type.value, is_default=is_default)
    return MasterStatusModel(
        uuid=status.uuid,
        name=status.name,
        type=status.type,
        is_default=status.is_default,
        created_at=datetime.now(timezone.utc),
        updated_at=datetime.now(timezone.utc),
    )


SEED_STATUSES = [
    ("Draft", RecordType.CARGO_MANIFEST, True),
    ("Confirmed", RecordType.CARGO_MANIFEST, False),
    ("Rejected", RecordType.CARGO_MANIFEST, False),
    ("WS_Draft", RecordType.WEIGHT_SLIP, True),
    ("WS_AwaitingCustomer", RecordType.WEIGHT_SLIP, False),
    ("WS_CustomerConfirmed", RecordType.WEIGHT_SLIP, False),
    ("WS_CustomerRejected", RecordType.WEIGHT_SLIP, False),
    ("WS_Confirmed", RecordType.WEIGHT_SLIP, False),
    ("WS_Rejected", RecordType.WEIGHT_SLIP, False),
    ("Cancelled", RecordType.WEIGHT_SLIP, False),
]


@pytest_asyncio.fixture
async def session_factory():
    """In-memory SQLite database shared by every session of one test."""
    engine = build_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    factory = build_session_factory(engine)
    async with factory() as session:
        session.add_all(_status(*row) for row in SEED_STATUSES)
        await session.commit()

    yield factory

    await engine.dispose()


@pytest.fixture
def uow_factory(session_factory):
    return lambda: SQLAlchemyUnitOfWork(session_factory, "Asia/Bangkok")
