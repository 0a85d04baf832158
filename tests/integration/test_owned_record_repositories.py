"""Integration tests for the SQLAlchemy unit of work and owned-record repositories."""

from datetime import date, datetime, timezone

import pytest
from sqlalchemy import func, select, update

from cargo_backoffice.application.services import (
    CargoManifestService,
    MasterStatusService,
    WeightSlipService,
)
from cargo_backoffice.domain.entities import (
    Agent,
    CargoManifest,
    CargoManifestItem,
    Weights,
    WeightSlip,
    WeightSlipDimension,
)
from cargo_backoffice.domain.exceptions import (
    ConfigurationError,
    DuplicateEntityError,
    EntityNotFoundError,
    StorageError,
)
from cargo_backoffice.infrastructure.database.models import (
    CargoManifestItemModel,
    CargoManifestModel,
    MasterStatusModel,
    WeightSlipDimensionModel,
    WeightSlipModel,
)


def _manifest(mawb_info_uuid: str = "mawb-1", hawbs: tuple[str, ...] = ("H1", "H2")) -> CargoManifest:
    return CargoManifest(
        mawb_info_uuid=mawb_info_uuid,
        mawb_number="217-12345675",
        flight_no="TG640",
        items=[
            CargoManifestItem(
                hawb_no=h,
                pkgs="1",
                shipper_name_and_address="Siam Exporters, Bangkok",
                consignee_name_and_address="Osaka Imports, Osaka",
            )
            for h in hawbs
        ],
    )


def _slip(mawb_info_uuid: str = "mawb-1") -> WeightSlip:
    return WeightSlip(
        mawb_info_uuid=mawb_info_uuid,
        slip_no="WS-1",
        agent=Agent(code="AG01", name="Bangkok Forwarding"),
        weights=Weights(gw=10.5, tw=0.5, nw=10.0, dim_weight=12.0, volume_m3=0.07),
        dimensions=[WeightSlipDimension(no=1, l_cm=40, w_cm=30, h_cm=20, pcs=2)],
    )


async def _count(session_factory, model) -> int:
    async with session_factory() as session:
        return (await session.execute(select(func.count()).select_from(model))).scalar_one()


@pytest.mark.asyncio
async def test_insert_reads_back_status_and_children(uow_factory):
    async with uow_factory() as uow:
        status = await uow.statuses.get_default_by_type("cargo_manifest")
        record = _manifest()
        record.assign_status(status)
        created = await uow.cargo_manifests.insert(record)
        await uow.commit()

    assert created.status == "Draft"
    assert [i.hawb_no for i in created.items] == ["H1", "H2"]
    assert created.items[0].shipper_name_and_address == "Siam Exporters, Bangkok"
    assert all(i.id is not None for i in created.items)


@pytest.mark.asyncio
async def test_unique_owning_key_is_enforced_by_storage(uow_factory, session_factory):
    async with uow_factory() as uow:
        await uow.cargo_manifests.insert(_manifest())
        await uow.commit()

    # Skips the service-level existence check on purpose
    with pytest.raises(DuplicateEntityError):
        async with uow_factory() as uow:
            await uow.cargo_manifests.insert(_manifest(hawbs=("H3",)))
            await uow.commit()

    assert await _count(session_factory, CargoManifestModel) == 1
    assert await _count(session_factory, CargoManifestItemModel) == 2


@pytest.mark.asyncio
async def test_uncommitted_unit_is_rolled_back(uow_factory, session_factory):
    with pytest.raises(RuntimeError):
        async with uow_factory() as uow:
            await uow.cargo_manifests.insert(_manifest())
            raise RuntimeError("boom")

    assert await _count(session_factory, CargoManifestModel) == 0
    assert await _count(session_factory, CargoManifestItemModel) == 0


@pytest.mark.asyncio
async def test_replace_swaps_children(uow_factory, session_factory):
    async with uow_factory() as uow:
        created = await uow.cargo_manifests.insert(_manifest())
        await uow.commit()

    async with uow_factory() as uow:
        incoming = _manifest(hawbs=("H9",))
        incoming.uuid = created.uuid
        incoming.status_uuid = created.status_uuid
        replaced = await uow.cargo_manifests.replace(incoming)
        await uow.commit()

    assert [i.hawb_no for i in replaced.items] == ["H9"]
    assert await _count(session_factory, CargoManifestItemModel) == 1


@pytest.mark.asyncio
async def test_replace_unknown_uuid_is_not_found(uow_factory):
    record = _manifest()
    record.uuid = "does-not-exist"
    with pytest.raises(EntityNotFoundError):
        async with uow_factory() as uow:
            await uow.cargo_manifests.replace(record)


@pytest.mark.asyncio
async def test_service_update_keeps_identity_and_resets_status(uow_factory):
    service = CargoManifestService(uow_factory)
    created = await service.create(_manifest())
    await service.confirm("mawb-1")

    updated = await service.update(_manifest(hawbs=("H7", "H8", "H9")))

    assert updated.uuid == created.uuid
    assert updated.status == "Draft"
    assert [i.hawb_no for i in updated.items] == ["H7", "H8", "H9"]


@pytest.mark.asyncio
async def test_weight_slip_round_trip_through_service(uow_factory, session_factory):
    service = WeightSlipService(uow_factory)
    created = await service.create(_slip())

    assert created.status == "WS_Draft"
    assert created.agent == Agent(code="AG01", name="Bangkok Forwarding")
    assert created.weights.dim_weight == 12.0
    assert created.dimensions[0].weight_slip_uuid == created.uuid

    await service.send_to_customer("mawb-1")
    found = await service.get_by_owning_key("mawb-1")
    assert found.status == "WS_AwaitingCustomer"
    assert await _count(session_factory, WeightSlipDimensionModel) == 1


@pytest.mark.asyncio
async def test_missing_default_leaves_no_weight_slip(uow_factory, session_factory):
    async with session_factory() as session:
        await session.execute(
            update(MasterStatusModel)
            .where(MasterStatusModel.type == "weight_slip")
            .values(is_default=False)
        )
        await session.commit()

    with pytest.raises(ConfigurationError):
        await WeightSlipService(uow_factory).create(_slip())

    assert await _count(session_factory, WeightSlipModel) == 0
    assert await _count(session_factory, WeightSlipDimensionModel) == 0


@pytest.mark.asyncio
async def test_get_all_filters_by_bangkok_calendar_day(uow_factory, session_factory):
    service = CargoManifestService(uow_factory)
    early = await service.create(_manifest("mawb-early"))
    late = await service.create(_manifest("mawb-late"))

    # 10:00 UTC is 17:00 on 1 May in Bangkok; 18:00 UTC is already 2 May there
    async with session_factory() as session:
        for uuid, created_at in (
            (early.uuid, datetime(2024, 5, 1, 10, tzinfo=timezone.utc)),
            (late.uuid, datetime(2024, 5, 1, 18, tzinfo=timezone.utc)),
        ):
            await session.execute(
                update(CargoManifestModel)
                .where(CargoManifestModel.uuid == uuid)
                .values(created_at=created_at)
            )
        await session.commit()

    first_day = await service.get_all(start_date=date(2024, 5, 1), end_date=date(2024, 5, 1))
    second_day = await service.get_all(start_date=date(2024, 5, 2), end_date=date(2024, 5, 2))
    everything = await service.get_all()

    assert [r.mawb_info_uuid for r in first_day] == ["mawb-early"]
    assert [r.mawb_info_uuid for r in second_day] == ["mawb-late"]
    assert [r.mawb_info_uuid for r in everything] == ["mawb-late", "mawb-early"]


@pytest.mark.asyncio
async def test_list_falls_back_to_draft_and_flags_cancelled(uow_factory, session_factory):
    service = WeightSlipService(uow_factory)
    kept = await service.create(_slip("mawb-1"))
    await service.create(_slip("mawb-2"))

    async with session_factory() as session:
        cancelled = (
            await session.execute(
                select(MasterStatusModel.uuid).where(MasterStatusModel.name == "Cancelled")
            )
        ).scalar_one()
    await service.update_status("mawb-2", cancelled)

    async with session_factory() as session:
        await session.execute(
            update(WeightSlipModel).where(WeightSlipModel.uuid == kept.uuid).values(status_uuid=None)
        )
        await session.commit()

    rows = {r.mawb_info_uuid: r for r in await service.get_all()}

    assert rows["mawb-1"].status == "Draft"
    assert rows["mawb-1"].is_deleted is False
    assert rows["mawb-2"].status == "Cancelled"
    assert rows["mawb-2"].is_deleted is True


@pytest.mark.asyncio
async def test_status_in_use_cannot_be_deleted(uow_factory, session_factory):
    created = await CargoManifestService(uow_factory).create(_manifest())
    statuses = MasterStatusService(uow_factory)

    with pytest.raises(StorageError):
        await statuses.delete_status(created.status_uuid)

    assert (await statuses.get_status(created.status_uuid)).name == "Draft"
    assert await _count(session_factory, CargoManifestModel) == 1


@pytest.mark.asyncio
async def test_update_status_to_unknown_status_is_rejected(uow_factory):
    service = WeightSlipService(uow_factory)
    await service.create(_slip())

    with pytest.raises(StorageError):
        await service.update_status("mawb-1", "no-such-status")

    assert (await service.get_by_owning_key("mawb-1")).status == "WS_Draft"
