"""Domain entities for weight slips and their measured dimensions."""

from dataclasses import dataclass, field
from datetime import datetime

from cargo_backoffice.domain.entities.owned_record import OwnedRecord


@dataclass
class Agent:
    code: str = ""
    name: str = ""


@dataclass
class Weights:
    """Weighing results in kilograms; volume in cubic metres."""

    gw: float = 0.0
    tw: float = 0.0
    nw: float = 0.0
    dim_weight: float = 0.0
    volume_m3: float = 0.0


@dataclass
class WeightSlipDimension:
    """One measured piece group (L x W x H in centimetres)."""

    no: int = 0
    l_cm: float = 0.0
    w_cm: float = 0.0
    h_cm: float = 0.0
    pcs: int = 0
    id: int | None = None
    weight_slip_uuid: str | None = None


@dataclass
class WeightSlip(OwnedRecord):
    """Weight slip for a MAWB — at most one per ``mawb_info_uuid``."""

    slip_no: str = ""
    wsid: str = ""
    date_time: datetime | None = None
    pseq: str = ""
    staff: str = ""
    mawb: str = ""
    hawb: str = ""
    dest: str = ""
    agent: Agent = field(default_factory=Agent)
    flight: str = ""
    nature_of_goods: str = ""
    ews: bool = False
    pcs: int = 0
    weights: Weights = field(default_factory=Weights)
    dimensions: list[WeightSlipDimension] = field(default_factory=list)


@dataclass
class WeightSlipListItem:
    """Condensed row for weight slip listings."""

    uuid: str
    mawb_info_uuid: str
    slip_no: str
    mawb: str
    hawb: str
    status: str
    is_deleted: bool
    created_at: datetime
