from typing import TYPE_CHECKING
from ...domain.repositories.device_repository import DeviceRepository
from ...application.use_cases.list_products import ListProductsUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class ProductProvider:
    """Product provider - registers catalog use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_lazy_singleton(
            ListProductsUseCase,
            lambda: ListProductsUseCase(container.get(DeviceRepository))
        )
