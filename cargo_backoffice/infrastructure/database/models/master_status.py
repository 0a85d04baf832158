"""SQLAlchemy ORM model for the status catalog."""

from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from cargo_backoffice.infrastructure.database.base import Base


class MasterStatusModel(Base):
    """ORM model — maps to the 'master_status' table."""

    __tablename__ = "master_status"

    uuid: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    type: Mapped[str] = mapped_column(String(50), nullable=False)
    is_default: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    __table_args__ = (
        Index("ix_master_status_type_default", "type", "is_default"),
        Index("ix_master_status_name_type", "name", "type"),
    )

    def __repr__(self) -> str:
        return f"<MasterStatusModel(uuid={self.uuid}, type='{self.type}', name='{self.name}')>"
