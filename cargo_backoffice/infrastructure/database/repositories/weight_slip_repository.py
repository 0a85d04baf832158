"""Concrete repository implementation for weight slips backed by SQLAlchemy."""

from typing import Any

from cargo_backoffice.application.interfaces import WeightSlipRepository
from cargo_backoffice.domain.entities import (
    Agent,
    Weights,
    WeightSlip,
    WeightSlipDimension,
    WeightSlipListItem,
)
from cargo_backoffice.infrastructure.database.models import WeightSlipDimensionModel, WeightSlipModel
from cargo_backoffice.infrastructure.database.repositories.owned_record_repository import (
    FALLBACK_STATUS_NAME,
    SQLAlchemyOwnedRecordRepository,
)

CANCELLED_STATUS_NAME = "Cancelled"


class SQLAlchemyWeightSlipRepository(
    SQLAlchemyOwnedRecordRepository[WeightSlip, WeightSlipListItem],
    WeightSlipRepository,
):
    """Implements the WeightSlipRepository port; flattens agent and weights into columns."""

    parent_model = WeightSlipModel
    child_model = WeightSlipDimensionModel
    child_key = "weight_slip_uuid"
    children_attr = "dimensions"
    unique_constraint = "uq_weight_slip_mawb_info_uuid"
    entity_name = "WeightSlip"

    def _to_entity(
        self,
        model: WeightSlipModel,
        status_name: str | None,
        children: list[WeightSlipDimensionModel],
    ) -> WeightSlip:
        return WeightSlip(
            uuid=model.uuid,
            mawb_info_uuid=model.mawb_info_uuid,
            slip_no=model.slip_no,
            wsid=model.wsid,
            date_time=model.date_time,
            pseq=model.pseq,
            staff=model.staff,
            mawb=model.mawb,
            hawb=model.hawb,
            dest=model.dest,
            agent=Agent(code=model.agent_code, name=model.agent_name),
            flight=model.flight,
            nature_of_goods=model.nature_of_goods,
            ews=model.ews,
            pcs=model.pcs,
            weights=Weights(
                gw=model.gw,
                tw=model.tw,
                nw=model.nw,
                dim_weight=model.dim_weight,
                volume_m3=model.volume_m3,
            ),
            status_uuid=model.status_uuid,
            status=status_name or "",
            dimensions=[
                WeightSlipDimension(
                    id=dim.id,
                    weight_slip_uuid=dim.weight_slip_uuid,
                    no=dim.no,
                    l_cm=dim.l_cm,
                    w_cm=dim.w_cm,
                    h_cm=dim.h_cm,
                    pcs=dim.pcs,
                )
                for dim in children
            ],
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_list_item(self, model: WeightSlipModel, status_name: str | None) -> WeightSlipListItem:
        status = status_name or FALLBACK_STATUS_NAME
        return WeightSlipListItem(
            uuid=model.uuid,
            mawb_info_uuid=model.mawb_info_uuid,
            slip_no=model.slip_no,
            mawb=model.mawb,
            hawb=model.hawb,
            status=status,
            is_deleted=status == CANCELLED_STATUS_NAME,
            created_at=model.created_at,
        )

    def _parent_values(self, record: WeightSlip) -> dict[str, Any]:
        return {
            "mawb_info_uuid": record.mawb_info_uuid,
            "slip_no": record.slip_no,
            "wsid": record.wsid,
            "date_time": record.date_time,
            "pseq": record.pseq,
            "staff": record.staff,
            "mawb": record.mawb,
            "hawb": record.hawb,
            "dest": record.dest,
            "agent_code": record.agent.code,
            "agent_name": record.agent.name,
            "flight": record.flight,
            "nature_of_goods": record.nature_of_goods,
            "ews": record.ews,
            "pcs": record.pcs,
            "gw": record.weights.gw,
            "tw": record.weights.tw,
            "nw": record.weights.nw,
            "dim_weight": record.weights.dim_weight,
            "volume_m3": record.weights.volume_m3,
            "status_uuid": record.status_uuid,
        }

    def _child_values(self, child: WeightSlipDimension) -> dict[str, Any]:
        return {
            "no": child.no,
            "l_cm": child.l_cm,
            "w_cm": child.w_cm,
            "h_cm": child.h_cm,
            "pcs": child.pcs,
        }
