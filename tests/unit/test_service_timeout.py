"""Service calls are bounded by the configured timeout."""

import asyncio

import pytest

from cargo_backoffice.application.services import CargoManifestService
from cargo_backoffice.domain.entities import CargoManifest

from fakes import FakeStore, FakeUnitOfWork, seeded_store


class SlowUnitOfWork(FakeUnitOfWork):
    async def commit(self) -> None:
        await asyncio.sleep(1)
        await super().commit()


class SlowCloseUnitOfWork(FakeUnitOfWork):
    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await asyncio.sleep(0.2)
        await super().__aexit__(exc_type, exc_val, exc_tb)


@pytest.fixture
def store() -> FakeStore:
    return seeded_store()


@pytest.mark.asyncio
async def test_create_times_out_and_rolls_back(store):
    service = CargoManifestService(lambda: SlowUnitOfWork(store), timeout=0.05)

    with pytest.raises(TimeoutError):
        await service.create(CargoManifest(mawb_info_uuid="mawb-1", mawb_number="217-1"))

    assert store.cargo_manifests == {}
    assert store.rollbacks == 1


@pytest.mark.asyncio
async def test_slow_close_after_commit_is_not_a_timeout(store):
    service = CargoManifestService(lambda: SlowCloseUnitOfWork(store), timeout=0.05)

    created = await service.create(CargoManifest(mawb_info_uuid="mawb-1", mawb_number="217-1"))

    assert created.uuid in store.cargo_manifests
    assert store.commits == 1
    assert store.rollbacks == 0


@pytest.mark.asyncio
async def test_reads_within_timeout_succeed(store):
    service = CargoManifestService(lambda: SlowUnitOfWork(store), timeout=0.05)
    assert await service.get_all() == []
