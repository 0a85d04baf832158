"""Pydantic DTOs for weight slips."""

from datetime import datetime

from pydantic import BaseModel, Field


class AgentSchema(BaseModel):
    code: str = Field("", max_length=50)
    name: str = Field("", max_length=255)

    model_config = {"from_attributes": True}


class WeightsSchema(BaseModel):
    gw: float = Field(0.0, ge=0)
    tw: float = Field(0.0, ge=0)
    nw: float = Field(0.0, ge=0)
    dim_weight: float = Field(0.0, ge=0)
    volume_m3: float = Field(0.0, ge=0)

    model_config = {"from_attributes": True}


class WeightSlipDimensionFields(BaseModel):
    no: int = Field(0, ge=0)
    l_cm: float = Field(0.0, ge=0)
    w_cm: float = Field(0.0, ge=0)
    h_cm: float = Field(0.0, ge=0)
    pcs: int = Field(0, ge=0)


class WeightSlipFields(BaseModel):
    """Editable fields of a weight slip header."""

    slip_no: str = Field("", max_length=50)
    wsid: str = Field("", max_length=50)
    date_time: datetime | None = None
    pseq: str = Field("", max_length=50)
    staff: str = Field("", max_length=100)
    mawb: str = Field("", max_length=50)
    hawb: str = Field("", max_length=50)
    dest: str = Field("", max_length=50)
    agent: AgentSchema = Field(default_factory=AgentSchema)
    flight: str = Field("", max_length=50)
    nature_of_goods: str = Field("", max_length=255)
    ews: bool = False
    pcs: int = Field(0, ge=0)
    weights: WeightsSchema = Field(default_factory=WeightsSchema)


class WeightSlipRequest(WeightSlipFields):
    """Body for create and update; ``uuid`` and ``status_uuid`` are ignored."""

    uuid: str | None = None
    status_uuid: str | None = None
    dimensions: list[WeightSlipDimensionFields] = Field(default_factory=list)


class WeightSlipDimensionResponse(WeightSlipDimensionFields):
    id: int | None = None
    weight_slip_uuid: str | None = None

    model_config = {"from_attributes": True}


class WeightSlipResponse(WeightSlipFields):
    uuid: str
    mawb_info_uuid: str
    status_uuid: str | None
    status: str
    dimensions: list[WeightSlipDimensionResponse]
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class WeightSlipListItemResponse(BaseModel):
    uuid: str
    mawb_info_uuid: str
    slip_no: str
    mawb: str
    hawb: str
    status: str
    is_deleted: bool
    created_at: datetime

    model_config = {"from_attributes": True}
