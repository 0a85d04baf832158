from .master_status import MasterStatusModel
from .cargo_manifest import CargoManifestItemModel, CargoManifestModel
from .weight_slip import WeightSlipDimensionModel, WeightSlipModel

__all__ = [
    "MasterStatusModel",
    "CargoManifestModel",
    "CargoManifestItemModel",
    "WeightSlipModel",
    "WeightSlipDimensionModel",
]
