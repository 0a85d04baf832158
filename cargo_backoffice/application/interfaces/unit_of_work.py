"""Unit of Work port — the transactional boundary for use cases.

Usage in a service::

    async with self._uow_factory() as uow:
        existing = await uow.cargo_manifests.get_by_owning_key(key)
        ...
        await uow.commit()
    # anything not committed is rolled back on exit

Every repository reached through a unit of work shares its transaction, so
reads observe the unit's own uncommitted writes while outside readers see
nothing until ``commit()`` succeeds.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Self

from cargo_backoffice.application.interfaces.cargo_manifest_repository import CargoManifestRepository
from cargo_backoffice.application.interfaces.master_status_repository import MasterStatusRepository
from cargo_backoffice.application.interfaces.weight_slip_repository import WeightSlipRepository


class UnitOfWork(ABC):
    """Abstract transactional boundary exposing transaction-bound repositories."""

    statuses: MasterStatusRepository
    cargo_manifests: CargoManifestRepository
    weight_slips: WeightSlipRepository

    @abstractmethod
    async def __aenter__(self) -> Self:
        ...

    @abstractmethod
    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Roll back anything not committed. Never suppresses the exception."""
        ...

    @abstractmethod
    async def commit(self) -> None:
        ...

    @abstractmethod
    async def rollback(self) -> None:
        """Discard uncommitted writes; a no-op once the unit has committed."""
        ...


UnitOfWorkFactory = Callable[[], UnitOfWork]
