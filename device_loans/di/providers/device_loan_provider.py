from typing import TYPE_CHECKING
from ...domain.repositories.device_loan_repository import DeviceLoanRepository
from ...application.services.device_loan_service import DeviceLoanService

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DeviceLoanProvider:
    """Device loan service provider - registers loan-related services"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register device loan service.
        Service is created with repository from container.
        """
        container.register_lazy_singleton(
            DeviceLoanService,
            lambda: DeviceLoanService(
                device_loan_repository=container.get(DeviceLoanRepository)
            )
        )
