"""FastAPI dependency injection — wires infrastructure to application layer."""

from cargo_backoffice.application.interfaces import UnitOfWorkFactory
from cargo_backoffice.application.services import (
    CargoManifestService,
    MasterStatusService,
    WeightSlipService,
)
from cargo_backoffice.config import get_settings
from cargo_backoffice.infrastructure.database import SQLAlchemyUnitOfWork, async_session_factory


def get_uow_factory() -> UnitOfWorkFactory:
    """Provides a factory that opens a fresh unit of work per service call."""
    settings = get_settings()
    return lambda: SQLAlchemyUnitOfWork(async_session_factory, settings.report_timezone)


def get_cargo_manifest_service() -> CargoManifestService:
    settings = get_settings()
    return CargoManifestService(get_uow_factory(), timeout=settings.service_timeout_seconds)


def get_weight_slip_service() -> WeightSlipService:
    settings = get_settings()
    return WeightSlipService(get_uow_factory(), timeout=settings.service_timeout_seconds)


def get_master_status_service() -> MasterStatusService:
    """Provides the status catalog service."""
    settings = get_settings()
    return MasterStatusService(get_uow_factory(), timeout=settings.service_timeout_seconds)
