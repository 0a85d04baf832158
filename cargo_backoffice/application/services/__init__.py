from .status_lookup import resolve_default_status, resolve_named_status
from .owned_record_service import OwnedRecordService
from .cargo_manifest_service import CargoManifestService
from .weight_slip_service import WeightSlipService
from .master_status_service import MasterStatusService

__all__ = [
    "resolve_default_status",
    "resolve_named_status",
    "OwnedRecordService",
    "CargoManifestService",
    "WeightSlipService",
    "MasterStatusService",
]
