"""Abstract repository interface (port) for cargo manifest persistence."""

from cargo_backoffice.application.interfaces.owned_record_repository import OwnedRecordRepository
from cargo_backoffice.domain.entities import CargoManifest, CargoManifestListItem


class CargoManifestRepository(OwnedRecordRepository[CargoManifest, CargoManifestListItem]):
    """Port for cargo manifests and their items."""
