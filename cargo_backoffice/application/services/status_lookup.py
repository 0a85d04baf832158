"""Status lookup — resolves catalog entries that records must carry."""

from cargo_backoffice.application.interfaces import MasterStatusRepository
from cargo_backoffice.domain.entities import MasterStatus
from cargo_backoffice.domain.exceptions import ConfigurationError


async def resolve_default_status(repository: MasterStatusRepository, status_type: str) -> MasterStatus:
    """Return the default status for a record type.

    Raises ConfigurationError when the catalog has no default for the type.
    """
    status = await repository.get_default_by_type(status_type)
    if status is None:
        raise ConfigurationError(
            f"no default status found for {status_type}", status_type=status_type
        )
    return status


async def resolve_named_status(
    repository: MasterStatusRepository, name: str, status_type: str
) -> MasterStatus:
    status = await repository.get_by_name_and_type(name, status_type)
    if status is None:
        raise ConfigurationError(
            f"status '{name}' not found for {status_type}", status_type=status_type
        )
    return status
