from .master_status import MasterStatus, RecordType
from .owned_record import OwnedRecord
from .cargo_manifest import CargoManifest, CargoManifestItem, CargoManifestListItem
from .weight_slip import (
    Agent,
    Weights,
    WeightSlip,
    WeightSlipDimension,
    WeightSlipListItem,
)

__all__ = [
    "MasterStatus",
    "RecordType",
    "OwnedRecord",
    "CargoManifest",
    "CargoManifestItem",
    "CargoManifestListItem",
    "Agent",
    "Weights",
    "WeightSlip",
    "WeightSlipDimension",
    "WeightSlipListItem",
]
