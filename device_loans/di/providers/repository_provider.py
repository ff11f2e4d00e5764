from typing import TYPE_CHECKING
from ...domain.repositories.device_loan_repository import DeviceLoanRepository
from ...domain.repositories.device_repository import DeviceRepository
from ...infrastructure.db.mongo_device_loan_repository import MongoDeviceLoanRepository
from ...infrastructure.db.mongo_device_repository import MongoDeviceRepository
from .database_provider import DatabaseProvider

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all repository implementations.
        Each repository is built on first use from the shared client.
        """
        container.register_lazy_singleton(
            DeviceRepository,
            lambda: MongoDeviceRepository(container.get(DatabaseProvider.CLIENT_KEY))
        )

        container.register_lazy_singleton(
            DeviceLoanRepository,
            lambda: MongoDeviceLoanRepository(container.get(DatabaseProvider.CLIENT_KEY))
        )
