"""
List Products Use Case
======================

Lists every record in the device catalog.
"""
from typing import List

from device_loans.domain.models.device import Device
from device_loans.domain.repositories.device_repository import DeviceRepository


class ListProductsUseCase:
    """Use case for listing the device catalog."""

    def __init__(self, device_repository: DeviceRepository):
        self._repository = device_repository

    async def execute(self) -> List[Device]:
        return await self._repository.find_all()
