from .master_status_repository import MasterStatusRepository
from .owned_record_repository import OwnedRecordRepository
from .cargo_manifest_repository import CargoManifestRepository
from .weight_slip_repository import WeightSlipRepository
from .unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "MasterStatusRepository",
    "OwnedRecordRepository",
    "CargoManifestRepository",
    "WeightSlipRepository",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
