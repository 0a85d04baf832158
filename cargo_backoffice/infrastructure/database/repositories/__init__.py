from .master_status_repository import SQLAlchemyMasterStatusRepository
from .cargo_manifest_repository import SQLAlchemyCargoManifestRepository
from .weight_slip_repository import SQLAlchemyWeightSlipRepository

__all__ = [
    "SQLAlchemyMasterStatusRepository",
    "SQLAlchemyCargoManifestRepository",
    "SQLAlchemyWeightSlipRepository",
]
