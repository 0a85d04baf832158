"""Concrete repository implementation for cargo manifests backed by SQLAlchemy."""

from typing import Any

from cargo_backoffice.application.interfaces import CargoManifestRepository
from cargo_backoffice.domain.entities import CargoManifest, CargoManifestItem, CargoManifestListItem
from cargo_backoffice.infrastructure.database.models import CargoManifestItemModel, CargoManifestModel
from cargo_backoffice.infrastructure.database.repositories.owned_record_repository import (
    FALLBACK_STATUS_NAME,
    SQLAlchemyOwnedRecordRepository,
)


class SQLAlchemyCargoManifestRepository(
    SQLAlchemyOwnedRecordRepository[CargoManifest, CargoManifestListItem],
    CargoManifestRepository,
):
    """Implements the CargoManifestRepository port using SQLAlchemy async sessions."""

    parent_model = CargoManifestModel
    child_model = CargoManifestItemModel
    child_key = "cargo_manifest_uuid"
    children_attr = "items"
    unique_constraint = "uq_cargo_manifest_mawb_info_uuid"
    entity_name = "CargoManifest"

    def _to_entity(
        self,
        model: CargoManifestModel,
        status_name: str | None,
        children: list[CargoManifestItemModel],
    ) -> CargoManifest:
        return CargoManifest(
            uuid=model.uuid,
            mawb_info_uuid=model.mawb_info_uuid,
            mawb_number=model.mawb_number,
            port_of_discharge=model.port_of_discharge,
            flight_no=model.flight_no,
            freight_date=model.freight_date,
            shipper=model.shipper,
            consignee=model.consignee,
            total_ctn=model.total_ctn,
            transshipment=model.transshipment,
            status_uuid=model.status_uuid,
            status=status_name or "",
            items=[
                CargoManifestItem(
                    id=item.id,
                    cargo_manifest_uuid=item.cargo_manifest_uuid,
                    hawb_no=item.hawb_no,
                    pkgs=item.pkgs,
                    gross_weight=item.gross_weight,
                    destination=item.destination,
                    commodity=item.commodity,
                    shipper_name_and_address=item.shipper_name_address,
                    consignee_name_and_address=item.consignee_name_address,
                )
                for item in children
            ],
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_list_item(self, model: CargoManifestModel, status_name: str | None) -> CargoManifestListItem:
        return CargoManifestListItem(
            uuid=model.uuid,
            mawb_info_uuid=model.mawb_info_uuid,
            mawb_number=model.mawb_number,
            flight_no=model.flight_no,
            shipper=model.shipper,
            consignee=model.consignee,
            status=status_name or FALLBACK_STATUS_NAME,
            created_at=model.created_at,
        )

    def _parent_values(self, record: CargoManifest) -> dict[str, Any]:
        return {
            "mawb_info_uuid": record.mawb_info_uuid,
            "mawb_number": record.mawb_number,
            "port_of_discharge": record.port_of_discharge,
            "flight_no": record.flight_no,
            "freight_date": record.freight_date,
            "shipper": record.shipper,
            "consignee": record.consignee,
            "total_ctn": record.total_ctn,
            "transshipment": record.transshipment,
            "status_uuid": record.status_uuid,
        }

    def _child_values(self, child: CargoManifestItem) -> dict[str, Any]:
        return {
            "hawb_no": child.hawb_no,
            "pkgs": child.pkgs,
            "gross_weight": child.gross_weight,
            "destination": child.destination,
            "commodity": child.commodity,
            "shipper_name_address": child.shipper_name_and_address,
            "consignee_name_address": child.consignee_name_and_address,
        }
