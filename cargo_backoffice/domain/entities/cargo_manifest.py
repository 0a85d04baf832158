"""Domain entities for cargo manifests and their HAWB line items."""

from dataclasses import dataclass, field
from datetime import datetime

from cargo_backoffice.domain.entities.owned_record import OwnedRecord


@dataclass
class CargoManifestItem:
    """One HAWB line on a cargo manifest. Owned entirely by its manifest."""

    hawb_no: str = ""
    pkgs: str = ""
    gross_weight: str = ""
    destination: str = ""
    commodity: str = ""
    shipper_name_and_address: str = ""
    consignee_name_and_address: str = ""
    id: int | None = None
    cargo_manifest_uuid: str | None = None


@dataclass
class CargoManifest(OwnedRecord):
    """Cargo manifest for a MAWB — at most one per ``mawb_info_uuid``."""

    mawb_number: str = ""
    port_of_discharge: str = ""
    flight_no: str = ""
    freight_date: str = ""
    shipper: str = ""
    consignee: str = ""
    total_ctn: str = ""
    transshipment: str = ""
    items: list[CargoManifestItem] = field(default_factory=list)


@dataclass
class CargoManifestListItem:
    """Condensed row for manifest listings."""

    uuid: str
    mawb_info_uuid: str
    mawb_number: str
    flight_no: str
    shipper: str
    consignee: str
    status: str
    created_at: datetime
