"""Status catalog CRUD endpoints."""

from fastapi import APIRouter, Depends, Query, status

from cargo_backoffice.application.schemas.master_status import (
    MasterStatusCreate,
    MasterStatusResponse,
    MasterStatusUpdate,
)
from cargo_backoffice.application.services import MasterStatusService
from cargo_backoffice.infrastructure.dependencies import get_master_status_service

router = APIRouter(prefix="/master-status", tags=["Master Status"])


@router.get("", response_model=list[MasterStatusResponse])
async def list_statuses(
    status_type: str | None = Query(None, alias="type", description="Filter by record type"),
    service: MasterStatusService = Depends(get_master_status_service),
) -> list[MasterStatusResponse]:
    statuses = await service.list_statuses(status_type)
    return [MasterStatusResponse.model_validate(s, from_attributes=True) for s in statuses]


@router.post("", response_model=MasterStatusResponse, status_code=status.HTTP_201_CREATED)
async def create_status(
    data: MasterStatusCreate,
    service: MasterStatusService = Depends(get_master_status_service),
) -> MasterStatusResponse:
    """Create a catalog entry; a new default replaces the type's previous one."""
    created = await service.create_status(data)
    return MasterStatusResponse.model_validate(created, from_attributes=True)


@router.get("/default/{status_type}", response_model=MasterStatusResponse)
async def get_default_status(
    status_type: str,
    service: MasterStatusService = Depends(get_master_status_service),
) -> MasterStatusResponse:
    default = await service.get_default_status(status_type)
    return MasterStatusResponse.model_validate(default, from_attributes=True)


@router.get("/{status_uuid}", response_model=MasterStatusResponse)
async def get_status(
    status_uuid: str,
    service: MasterStatusService = Depends(get_master_status_service),
) -> MasterStatusResponse:
    found = await service.get_status(status_uuid)
    return MasterStatusResponse.model_validate(found, from_attributes=True)


@router.put("/{status_uuid}", response_model=MasterStatusResponse)
async def update_status(
    status_uuid: str,
    data: MasterStatusUpdate,
    service: MasterStatusService = Depends(get_master_status_service),
) -> MasterStatusResponse:
    updated = await service.update_status(status_uuid, data)
    return MasterStatusResponse.model_validate(updated, from_attributes=True)


@router.delete("/{status_uuid}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_status(
    status_uuid: str,
    service: MasterStatusService = Depends(get_master_status_service),
) -> None:
    await service.delete_status(status_uuid)
