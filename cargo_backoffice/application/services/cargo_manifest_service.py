"""Application service (use case) for cargo manifests."""

from cargo_backoffice.application.interfaces import CargoManifestRepository, UnitOfWork
from cargo_backoffice.application.services.owned_record_service import OwnedRecordService
from cargo_backoffice.domain.entities import CargoManifest, CargoManifestListItem, RecordType

CONFIRMED = "Confirmed"
REJECTED = "Rejected"


class CargoManifestService(OwnedRecordService[CargoManifest, CargoManifestListItem]):
    """One cargo manifest per MAWB; reset to the default status on every save."""

    record_type = RecordType.CARGO_MANIFEST
    entity_name = "CargoManifest"
    transitions = frozenset({CONFIRMED, REJECTED})

    def _repository(self, uow: UnitOfWork) -> CargoManifestRepository:
        return uow.cargo_manifests

    async def confirm(self, mawb_info_uuid: str) -> None:
        await self.transition(mawb_info_uuid, CONFIRMED)

    async def reject(self, mawb_info_uuid: str) -> None:
        await self.transition(mawb_info_uuid, REJECTED)
