"""Pydantic DTOs for the status catalog."""

from datetime import datetime

from pydantic import BaseModel, Field


class MasterStatusCreate(BaseModel):
    """Schema for creating a catalog entry."""

    name: str = Field(..., min_length=1, max_length=100, examples=["Draft"])
    type: str = Field(..., min_length=1, max_length=50, examples=["cargo_manifest"])
    is_default: bool = False


class MasterStatusUpdate(BaseModel):
    """Schema for updating a catalog entry — all fields optional."""

    name: str | None = Field(None, min_length=1, max_length=100)
    type: str | None = Field(None, min_length=1, max_length=50)
    is_default: bool | None = None


class MasterStatusResponse(BaseModel):
    uuid: str
    name: str
    type: str
    is_default: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
