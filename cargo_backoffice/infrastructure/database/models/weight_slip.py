"""SQLAlchemy ORM models for weight slips and their dimensions."""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, Float, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from cargo_backoffice.infrastructure.database.base import Base


class WeightSlipModel(Base):
    """ORM model — maps to the 'weight_slip' table (one row per MAWB).

    Agent and weight value objects are stored flattened.
    """

    __tablename__ = "weight_slip"

    uuid: Mapped[str] = mapped_column(String(36), primary_key=True)
    mawb_info_uuid: Mapped[str] = mapped_column(String(36), nullable=False)
    slip_no: Mapped[str] = mapped_column(String(50), nullable=False, default="")
    wsid: Mapped[str] = mapped_column(String(50), nullable=False, default="")
    date_time: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    pseq: Mapped[str] = mapped_column(String(50), nullable=False, default="")
    staff: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    mawb: Mapped[str] = mapped_column(String(50), nullable=False, default="")
    hawb: Mapped[str] = mapped_column(String(50), nullable=False, default="")
    dest: Mapped[str] = mapped_column(String(50), nullable=False, default="")
    agent_code: Mapped[str] = mapped_column(String(50), nullable=False, default="")
    agent_name: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    flight: Mapped[str] = mapped_column(String(50), nullable=False, default="")
    nature_of_goods: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    ews: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    pcs: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    gw: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    tw: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    nw: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    dim_weight: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    volume_m3: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    status_uuid: Mapped[str | None] = mapped_column(
        String(36), ForeignKey("master_status.uuid"), nullable=True
    )
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    __table_args__ = (
        UniqueConstraint("mawb_info_uuid", name="uq_weight_slip_mawb_info_uuid"),
    )

    def __repr__(self) -> str:
        return f"<WeightSlipModel(uuid={self.uuid}, mawb_info_uuid={self.mawb_info_uuid})>"


class WeightSlipDimensionModel(Base):
    """ORM model — maps to the 'weight_slip_dimensions' table."""

    __tablename__ = "weight_slip_dimensions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    weight_slip_uuid: Mapped[str] = mapped_column(
        "weightslip_uuid",
        String(36),
        ForeignKey("weight_slip.uuid", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    no: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    l_cm: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    w_cm: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    h_cm: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    pcs: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
