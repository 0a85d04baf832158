"""Pydantic DTOs for cargo manifests.

The manifest and item field sets are declared once and composed into the
request and response shapes.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class CargoManifestItemFields(BaseModel):
    """Editable fields of one HAWB line."""

    hawb_no: str = Field("", max_length=100, examples=["HAWB-0001"])
    pkgs: str = Field("", max_length=50)
    gross_weight: str = Field("", max_length=50)
    destination: str = Field("", max_length=100)
    commodity: str = Field("", max_length=255)
    shipper_name_and_address: str = ""
    consignee_name_and_address: str = ""


class CargoManifestFields(BaseModel):
    """Editable fields of a manifest header."""

    mawb_number: str = Field(..., min_length=1, max_length=50, examples=["217-12345675"])
    port_of_discharge: str = Field("", max_length=100)
    flight_no: str = Field("", max_length=50)
    freight_date: str = Field("", max_length=50)
    shipper: str = ""
    consignee: str = ""
    total_ctn: str = Field("", max_length=50)
    transshipment: str = Field("", max_length=100)


class CargoManifestRequest(CargoManifestFields):
    """Body for create and update.

    ``uuid`` and ``status_uuid`` are accepted for client convenience but never
    used: the target comes from the MAWB in the path and the status is reset.
    """

    uuid: str | None = None
    status_uuid: str | None = None
    items: list[CargoManifestItemFields] = Field(default_factory=list)


class CargoManifestItemResponse(CargoManifestItemFields):
    id: int | None = None
    cargo_manifest_uuid: str | None = None

    model_config = {"from_attributes": True}


class CargoManifestResponse(CargoManifestFields):
    uuid: str
    mawb_info_uuid: str
    status_uuid: str | None
    status: str
    items: list[CargoManifestItemResponse]
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class CargoManifestListItemResponse(BaseModel):
    uuid: str
    mawb_info_uuid: str
    mawb_number: str
    flight_no: str
    shipper: str
    consignee: str
    status: str
    created_at: datetime

    model_config = {"from_attributes": True}
