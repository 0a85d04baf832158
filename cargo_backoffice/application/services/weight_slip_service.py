"""Application service (use case) for weight slips.

Besides the shared create/update orchestration, a weight slip moves through
a customer review loop: sent to the customer, confirmed or rejected by the
customer, then confirmed or rejected internally.
"""

from cargo_backoffice.application.interfaces import UnitOfWork, WeightSlipRepository
from cargo_backoffice.application.services.owned_record_service import OwnedRecordService
from cargo_backoffice.domain.entities import RecordType, WeightSlip, WeightSlipListItem

AWAITING_CUSTOMER = "WS_AwaitingCustomer"
CUSTOMER_CONFIRMED = "WS_CustomerConfirmed"
CUSTOMER_REJECTED = "WS_CustomerRejected"
CONFIRMED = "WS_Confirmed"
REJECTED = "WS_Rejected"


class WeightSlipService(OwnedRecordService[WeightSlip, WeightSlipListItem]):
    """One weight slip per MAWB; reset to the default status on every save."""

    record_type = RecordType.WEIGHT_SLIP
    entity_name = "WeightSlip"
    transitions = frozenset(
        {AWAITING_CUSTOMER, CUSTOMER_CONFIRMED, CUSTOMER_REJECTED, CONFIRMED, REJECTED}
    )

    def _repository(self, uow: UnitOfWork) -> WeightSlipRepository:
        return uow.weight_slips

    async def send_to_customer(self, mawb_info_uuid: str) -> None:
        await self.transition(mawb_info_uuid, AWAITING_CUSTOMER)

    async def customer_confirm(self, mawb_info_uuid: str) -> None:
        await self.transition(mawb_info_uuid, CUSTOMER_CONFIRMED)

    async def customer_reject(self, mawb_info_uuid: str) -> None:
        await self.transition(mawb_info_uuid, CUSTOMER_REJECTED)

    async def confirm(self, mawb_info_uuid: str) -> None:
        await self.transition(mawb_info_uuid, CONFIRMED)

    async def reject(self, mawb_info_uuid: str) -> None:
        await self.transition(mawb_info_uuid, REJECTED)
