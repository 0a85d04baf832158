"""SQLAlchemy ORM models for cargo manifests and their items."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from cargo_backoffice.infrastructure.database.base import Base


class CargoManifestModel(Base):
    """ORM model — maps to the 'cargo_manifest' table (one row per MAWB)."""

    __tablename__ = "cargo_manifest"

    uuid: Mapped[str] = mapped_column(String(36), primary_key=True)
    mawb_info_uuid: Mapped[str] = mapped_column(String(36), nullable=False)
    mawb_number: Mapped[str] = mapped_column(String(50), nullable=False, default="")
    port_of_discharge: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    flight_no: Mapped[str] = mapped_column(String(50), nullable=False, default="")
    freight_date: Mapped[str] = mapped_column(String(50), nullable=False, default="")
    shipper: Mapped[str] = mapped_column(Text, nullable=False, default="")
    consignee: Mapped[str] = mapped_column(Text, nullable=False, default="")
    total_ctn: Mapped[str] = mapped_column(String(50), nullable=False, default="")
    transshipment: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    status_uuid: Mapped[str | None] = mapped_column(
        String(36), ForeignKey("master_status.uuid"), nullable=True
    )
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    __table_args__ = (
        UniqueConstraint("mawb_info_uuid", name="uq_cargo_manifest_mawb_info_uuid"),
    )

    def __repr__(self) -> str:
        return f"<CargoManifestModel(uuid={self.uuid}, mawb_info_uuid={self.mawb_info_uuid})>"


class CargoManifestItemModel(Base):
    """ORM model — maps to the 'cargo_manifest_items' table."""

    __tablename__ = "cargo_manifest_items"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    cargo_manifest_uuid: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("cargo_manifest.uuid", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    hawb_no: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    pkgs: Mapped[str] = mapped_column(String(50), nullable=False, default="")
    gross_weight: Mapped[str] = mapped_column(String(50), nullable=False, default="")
    destination: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    commodity: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    shipper_name_address: Mapped[str] = mapped_column(Text, nullable=False, default="")
    consignee_name_address: Mapped[str] = mapped_column(Text, nullable=False, default="")
