"""Cargo manifest endpoints.

A manifest is addressed through the MAWB it belongs to; the flat
``/cargo-manifests`` routes serve listings and lookups by manifest uuid.
Domain errors are turned into responses by the app-level exception handlers.
"""

from datetime import date

from fastapi import APIRouter, Depends, Query, status

from cargo_backoffice.application.schemas.cargo_manifest import (
    CargoManifestListItemResponse,
    CargoManifestRequest,
    CargoManifestResponse,
)
from cargo_backoffice.application.services import CargoManifestService
from cargo_backoffice.domain.entities import CargoManifest, CargoManifestItem
from cargo_backoffice.infrastructure.dependencies import get_cargo_manifest_service

router = APIRouter(tags=["Cargo Manifests"])


def _to_entity(mawb_info_uuid: str, data: CargoManifestRequest) -> CargoManifest:
    """Build the domain record; body ``uuid``/``status_uuid`` are dropped."""
    fields = data.model_dump(exclude={"uuid", "status_uuid", "items"})
    return CargoManifest(
        mawb_info_uuid=mawb_info_uuid,
        items=[CargoManifestItem(**item.model_dump()) for item in data.items],
        **fields,
    )


@router.get(
    "/mawb-info/{mawb_info_uuid}/cargo-manifest",
    response_model=CargoManifestResponse,
)
async def get_cargo_manifest(
    mawb_info_uuid: str,
    service: CargoManifestService = Depends(get_cargo_manifest_service),
) -> CargoManifestResponse:
    """Retrieve the manifest of a MAWB."""
    manifest = await service.get_by_owning_key(mawb_info_uuid)
    return CargoManifestResponse.model_validate(manifest, from_attributes=True)


@router.post(
    "/mawb-info/{mawb_info_uuid}/cargo-manifest",
    response_model=CargoManifestResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_cargo_manifest(
    mawb_info_uuid: str,
    data: CargoManifestRequest,
    service: CargoManifestService = Depends(get_cargo_manifest_service),
) -> CargoManifestResponse:
    """Create the manifest of a MAWB with the default status."""
    manifest = await service.create(_to_entity(mawb_info_uuid, data))
    return CargoManifestResponse.model_validate(manifest, from_attributes=True)


@router.put(
    "/mawb-info/{mawb_info_uuid}/cargo-manifest",
    response_model=CargoManifestResponse,
)
async def update_cargo_manifest(
    mawb_info_uuid: str,
    data: CargoManifestRequest,
    service: CargoManifestService = Depends(get_cargo_manifest_service),
) -> CargoManifestResponse:
    """Replace the manifest and its items; status goes back to the default."""
    manifest = await service.update(_to_entity(mawb_info_uuid, data))
    return CargoManifestResponse.model_validate(manifest, from_attributes=True)


@router.post(
    "/mawb-info/{mawb_info_uuid}/cargo-manifest/confirm",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def confirm_cargo_manifest(
    mawb_info_uuid: str,
    service: CargoManifestService = Depends(get_cargo_manifest_service),
) -> None:
    await service.confirm(mawb_info_uuid)


@router.post(
    "/mawb-info/{mawb_info_uuid}/cargo-manifest/reject",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def reject_cargo_manifest(
    mawb_info_uuid: str,
    service: CargoManifestService = Depends(get_cargo_manifest_service),
) -> None:
    await service.reject(mawb_info_uuid)


@router.get("/cargo-manifests", response_model=list[CargoManifestListItemResponse])
async def list_cargo_manifests(
    start_date: date | None = Query(None, description="First creation day (inclusive)"),
    end_date: date | None = Query(None, description="Last creation day (inclusive)"),
    service: CargoManifestService = Depends(get_cargo_manifest_service),
) -> list[CargoManifestListItemResponse]:
    """List manifests, newest first, optionally limited to a creation-day range."""
    rows = await service.get_all(start_date=start_date, end_date=end_date)
    return [CargoManifestListItemResponse.model_validate(r, from_attributes=True) for r in rows]


@router.get("/cargo-manifests/{manifest_uuid}", response_model=CargoManifestResponse)
async def get_cargo_manifest_by_uuid(
    manifest_uuid: str,
    service: CargoManifestService = Depends(get_cargo_manifest_service),
) -> CargoManifestResponse:
    manifest = await service.get_by_id(manifest_uuid)
    return CargoManifestResponse.model_validate(manifest, from_attributes=True)
