"""Unit tests for the CargoManifestService."""

from datetime import date, datetime, timezone

import pytest

from cargo_backoffice.application.services import CargoManifestService
from cargo_backoffice.domain.entities import CargoManifest, CargoManifestItem, RecordType
from cargo_backoffice.domain.exceptions import (
    ConfigurationError,
    DuplicateEntityError,
    EntityNotFoundError,
    InvalidRequestError,
    StorageError,
)

from fakes import FakeStore, FakeUnitOfWork, seeded_store


def _manifest(mawb_info_uuid: str = "mawb-1", **overrides) -> CargoManifest:
    fields = {
        "mawb_number": "217-12345675",
        "flight_no": "TG640",
        "shipper": "Siam Exporters",
        "consignee": "Osaka Imports",
        "items": [
            CargoManifestItem(hawb_no="H1", pkgs="10", gross_weight="120.5"),
            CargoManifestItem(hawb_no="H2", pkgs="4", gross_weight="33"),
        ],
    }
    fields.update(overrides)
    return CargoManifest(mawb_info_uuid=mawb_info_uuid, **fields)


@pytest.fixture
def store() -> FakeStore:
    return seeded_store()


@pytest.fixture
def service(store: FakeStore) -> CargoManifestService:
    return CargoManifestService(lambda: FakeUnitOfWork(store))


def _default(store, status_type=RecordType.CARGO_MANIFEST):
    return next(s for s in store.statuses.values() if s.type == status_type.value and s.is_default)


@pytest.mark.asyncio
async def test_create_assigns_default_status(service, store):
    created = await service.create(_manifest())

    assert created.uuid is not None
    assert created.status_uuid == _default(store).uuid
    assert created.status == "Draft"
    assert [i.hawb_no for i in created.items] == ["H1", "H2"]
    assert all(i.cargo_manifest_uuid == created.uuid for i in created.items)
    assert store.commits == 1


@pytest.mark.asyncio
async def test_create_ignores_caller_status(service, store):
    confirmed = next(s for s in store.statuses.values() if s.name == "Confirmed")
    created = await service.create(_manifest(status_uuid=confirmed.uuid))
    assert created.status_uuid == _default(store).uuid


@pytest.mark.asyncio
async def test_create_twice_for_same_mawb_is_duplicate(service, store):
    await service.create(_manifest("MAWB-001"))

    with pytest.raises(DuplicateEntityError):
        await service.create(_manifest("MAWB-001", mawb_number="999-00000000"))

    assert len(store.cargo_manifests) == 1
    assert store.commits == 1


@pytest.mark.asyncio
async def test_create_requires_owning_key(service, store):
    with pytest.raises(InvalidRequestError):
        await service.create(_manifest(mawb_info_uuid="   "))
    assert store.cargo_manifests == {}


@pytest.mark.asyncio
async def test_create_without_default_status_is_configuration_error(service, store):
    for status in store.statuses.values():
        status.is_default = False

    with pytest.raises(ConfigurationError, match="no default status found for cargo_manifest"):
        await service.create(_manifest())

    assert store.cargo_manifests == {}


@pytest.mark.asyncio
async def test_failed_insert_leaves_nothing_behind(service, store):
    store.fail_on.add("insert")

    with pytest.raises(StorageError):
        await service.create(_manifest())

    assert store.cargo_manifests == {}
    assert store.commits == 0
    assert store.rollbacks == 1


@pytest.mark.asyncio
async def test_update_replaces_items_and_keeps_identity(service, store):
    created = await service.create(_manifest())

    incoming = _manifest(
        mawb_number="217-99999999",
        items=[CargoManifestItem(hawb_no="H9", pkgs="1", gross_weight="5")],
    )
    incoming.uuid = "forged-uuid"
    updated = await service.update(incoming)

    assert updated.uuid == created.uuid
    assert updated.created_at == created.created_at
    assert updated.mawb_number == "217-99999999"
    assert [i.hawb_no for i in updated.items] == ["H9"]
    assert "forged-uuid" not in store.cargo_manifests


@pytest.mark.asyncio
async def test_update_with_empty_items_removes_all(service, store):
    await service.create(_manifest())
    updated = await service.update(_manifest(items=[]))
    assert updated.items == []


@pytest.mark.asyncio
async def test_update_resets_status_to_default(service, store):
    await service.create(_manifest())
    await service.confirm("mawb-1")

    updated = await service.update(_manifest())

    assert updated.status == "Draft"
    assert updated.status_uuid == _default(store).uuid


@pytest.mark.asyncio
async def test_update_missing_record_is_not_found(service, store):
    with pytest.raises(EntityNotFoundError):
        await service.update(_manifest("mawb-unknown"))
    assert store.cargo_manifests == {}


@pytest.mark.asyncio
async def test_failed_replace_keeps_previous_version(service, store):
    await service.create(_manifest())
    store.fail_on.add("replace")

    with pytest.raises(StorageError):
        await service.update(_manifest(items=[]))

    stored = next(iter(store.cargo_manifests.values()))
    assert len(stored.items) == 2


@pytest.mark.asyncio
async def test_update_status_sets_status_and_keeps_items(service, store):
    await service.create(_manifest())
    rejected = next(s for s in store.statuses.values() if s.name == "Rejected")

    result = await service.update_status("mawb-1", rejected.uuid)

    assert result is None
    found = await service.get_by_owning_key("mawb-1")
    assert found.status_uuid == rejected.uuid
    assert found.status == "Rejected"
    assert len(found.items) == 2


@pytest.mark.asyncio
async def test_update_status_missing_record_is_not_found(service):
    with pytest.raises(EntityNotFoundError):
        await service.update_status("mawb-unknown", "any-status")


@pytest.mark.asyncio
async def test_confirm_and_reject(service):
    await service.create(_manifest())

    await service.confirm("mawb-1")
    assert (await service.get_by_owning_key("mawb-1")).status == "Confirmed"

    await service.reject("mawb-1")
    assert (await service.get_by_owning_key("mawb-1")).status == "Rejected"


@pytest.mark.asyncio
async def test_transition_to_unknown_name_is_rejected(service):
    await service.create(_manifest())
    with pytest.raises(InvalidRequestError):
        await service.transition("mawb-1", "WS_Confirmed")


@pytest.mark.asyncio
async def test_transition_with_missing_catalog_entry_is_configuration_error(service, store):
    await service.create(_manifest())
    confirmed = next(s for s in store.statuses.values() if s.name == "Confirmed")
    del store.statuses[confirmed.uuid]

    with pytest.raises(ConfigurationError):
        await service.confirm("mawb-1")


@pytest.mark.asyncio
async def test_get_by_owning_key_not_found(service):
    with pytest.raises(EntityNotFoundError):
        await service.get_by_owning_key("mawb-unknown")


@pytest.mark.asyncio
async def test_get_by_id(service):
    created = await service.create(_manifest())
    found = await service.get_by_id(created.uuid)
    assert found.mawb_info_uuid == "mawb-1"

    with pytest.raises(EntityNotFoundError):
        await service.get_by_id("nope")


@pytest.mark.asyncio
async def test_get_all_lists_newest_first(service, store):
    older = await service.create(_manifest("mawb-1"))
    newer = await service.create(_manifest("mawb-2"))
    store.cargo_manifests[older.uuid].created_at = datetime(2024, 5, 1, 3, tzinfo=timezone.utc)
    store.cargo_manifests[newer.uuid].created_at = datetime(2024, 5, 2, 3, tzinfo=timezone.utc)

    rows = await service.get_all()

    assert [r.mawb_info_uuid for r in rows] == ["mawb-2", "mawb-1"]
    assert all(r.status == "Draft" for r in rows)

    only_first_day = await service.get_all(start_date=date(2024, 5, 1), end_date=date(2024, 5, 1))
    assert [r.mawb_info_uuid for r in only_first_day] == ["mawb-1"]


@pytest.mark.asyncio
async def test_get_all_rejects_inverted_range(service):
    with pytest.raises(InvalidRequestError):
        await service.get_all(start_date=date(2024, 5, 2), end_date=date(2024, 5, 1))
