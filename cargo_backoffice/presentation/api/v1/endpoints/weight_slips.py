"""Weight slip endpoints, including the customer review transitions."""

from datetime import date

from fastapi import APIRouter, Depends, Query, status

from cargo_backoffice.application.schemas.weight_slip import (
    WeightSlipListItemResponse,
    WeightSlipRequest,
    WeightSlipResponse,
)
from cargo_backoffice.application.services import WeightSlipService
from cargo_backoffice.domain.entities import Agent, Weights, WeightSlip, WeightSlipDimension
from cargo_backoffice.infrastructure.dependencies import get_weight_slip_service

router = APIRouter(tags=["Weight Slips"])


def _to_entity(mawb_info_uuid: str, data: WeightSlipRequest) -> WeightSlip:
    fields = data.model_dump(exclude={"uuid", "status_uuid", "agent", "weights", "dimensions"})
    return WeightSlip(
        mawb_info_uuid=mawb_info_uuid,
        agent=Agent(**data.agent.model_dump()),
        weights=Weights(**data.weights.model_dump()),
        dimensions=[WeightSlipDimension(**dim.model_dump()) for dim in data.dimensions],
        **fields,
    )


@router.get("/mawb-info/{mawb_info_uuid}/weight-slip", response_model=WeightSlipResponse)
async def get_weight_slip(
    mawb_info_uuid: str,
    service: WeightSlipService = Depends(get_weight_slip_service),
) -> WeightSlipResponse:
    """Retrieve the weight slip of a MAWB."""
    slip = await service.get_by_owning_key(mawb_info_uuid)
    return WeightSlipResponse.model_validate(slip, from_attributes=True)


@router.post(
    "/mawb-info/{mawb_info_uuid}/weight-slip",
    response_model=WeightSlipResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_weight_slip(
    mawb_info_uuid: str,
    data: WeightSlipRequest,
    service: WeightSlipService = Depends(get_weight_slip_service),
) -> WeightSlipResponse:
    """Create the weight slip of a MAWB with the default status."""
    slip = await service.create(_to_entity(mawb_info_uuid, data))
    return WeightSlipResponse.model_validate(slip, from_attributes=True)


@router.put("/mawb-info/{mawb_info_uuid}/weight-slip", response_model=WeightSlipResponse)
async def update_weight_slip(
    mawb_info_uuid: str,
    data: WeightSlipRequest,
    service: WeightSlipService = Depends(get_weight_slip_service),
) -> WeightSlipResponse:
    """Replace the weight slip and its dimensions; status goes back to the default."""
    slip = await service.update(_to_entity(mawb_info_uuid, data))
    return WeightSlipResponse.model_validate(slip, from_attributes=True)


@router.post(
    "/mawb-info/{mawb_info_uuid}/weight-slip/send-customer",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def send_weight_slip_to_customer(
    mawb_info_uuid: str,
    service: WeightSlipService = Depends(get_weight_slip_service),
) -> None:
    await service.send_to_customer(mawb_info_uuid)


@router.post(
    "/mawb-info/{mawb_info_uuid}/weight-slip/customer-confirm",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def customer_confirm_weight_slip(
    mawb_info_uuid: str,
    service: WeightSlipService = Depends(get_weight_slip_service),
) -> None:
    await service.customer_confirm(mawb_info_uuid)


@router.post(
    "/mawb-info/{mawb_info_uuid}/weight-slip/customer-reject",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def customer_reject_weight_slip(
    mawb_info_uuid: str,
    service: WeightSlipService = Depends(get_weight_slip_service),
) -> None:
    await service.customer_reject(mawb_info_uuid)


@router.post(
    "/mawb-info/{mawb_info_uuid}/weight-slip/confirm",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def confirm_weight_slip(
    mawb_info_uuid: str,
    service: WeightSlipService = Depends(get_weight_slip_service),
) -> None:
    await service.confirm(mawb_info_uuid)


@router.post(
    "/mawb-info/{mawb_info_uuid}/weight-slip/reject",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def reject_weight_slip(
    mawb_info_uuid: str,
    service: WeightSlipService = Depends(get_weight_slip_service),
) -> None:
    await service.reject(mawb_info_uuid)


@router.get("/weight-slips", response_model=list[WeightSlipListItemResponse])
async def list_weight_slips(
    start_date: date | None = Query(None, description="First creation day (inclusive)"),
    end_date: date | None = Query(None, description="Last creation day (inclusive)"),
    service: WeightSlipService = Depends(get_weight_slip_service),
) -> list[WeightSlipListItemResponse]:
    """List weight slips, newest first; cancelled slips are flagged ``is_deleted``."""
    rows = await service.get_all(start_date=start_date, end_date=end_date)
    return [WeightSlipListItemResponse.model_validate(r, from_attributes=True) for r in rows]


@router.get("/weight-slips/{slip_uuid}", response_model=WeightSlipResponse)
async def get_weight_slip_by_uuid(
    slip_uuid: str,
    service: WeightSlipService = Depends(get_weight_slip_service),
) -> WeightSlipResponse:
    slip = await service.get_by_id(slip_uuid)
    return WeightSlipResponse.model_validate(slip, from_attributes=True)
