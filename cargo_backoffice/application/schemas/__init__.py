from .master_status import MasterStatusCreate, MasterStatusResponse, MasterStatusUpdate
from .cargo_manifest import (
    CargoManifestItemFields,
    CargoManifestItemResponse,
    CargoManifestListItemResponse,
    CargoManifestRequest,
    CargoManifestResponse,
)
from .weight_slip import (
    AgentSchema,
    WeightsSchema,
    WeightSlipDimensionFields,
    WeightSlipDimensionResponse,
    WeightSlipListItemResponse,
    WeightSlipRequest,
    WeightSlipResponse,
)

__all__ = [
    "MasterStatusCreate",
    "MasterStatusResponse",
    "MasterStatusUpdate",
    "CargoManifestItemFields",
    "CargoManifestItemResponse",
    "CargoManifestListItemResponse",
    "CargoManifestRequest",
    "CargoManifestResponse",
    "AgentSchema",
    "WeightsSchema",
    "WeightSlipDimensionFields",
    "WeightSlipDimensionResponse",
    "WeightSlipListItemResponse",
    "WeightSlipRequest",
    "WeightSlipResponse",
]
