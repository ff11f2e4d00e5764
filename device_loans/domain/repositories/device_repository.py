"""
Device Repository Interface
===========================

Abstract interface for device catalog data access.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from device_loans.domain.models.device import Device


class DeviceRepository(ABC):
    """Abstract repository for the device catalog."""

    @abstractmethod
    async def save(self, device: Device) -> Device:
        """Insert or replace a device keyed by its ID."""

    @abstractmethod
    async def find_all(self) -> List[Device]:
        """Find all devices."""

    @abstractmethod
    async def find_by_id(self, device_id: str) -> Optional[Device]:
        """
        Find a device by its ID.

        Returns:
            Device if found, None otherwise
        """
