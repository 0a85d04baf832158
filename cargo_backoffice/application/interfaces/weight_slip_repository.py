"""Abstract repository interface (port) for weight slip persistence."""

from cargo_backoffice.application.interfaces.owned_record_repository import OwnedRecordRepository
from cargo_backoffice.domain.entities import WeightSlip, WeightSlipListItem


class WeightSlipRepository(OwnedRecordRepository[WeightSlip, WeightSlipListItem]):
    """Port for weight slips and their dimensions."""
