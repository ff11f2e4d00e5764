"""
Device Loan Repository Interface
================================

Abstract interface for device loan data access.
Implementations should be in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from device_loans.domain.models.device_loan import DeviceLoan


class DeviceLoanRepository(ABC):
    """
    Abstract repository for device loan persistence operations.

    Point lookups on a missing id resolve to None/False rather than
    raising. Any other store error propagates to the caller unchanged.
    """

    @abstractmethod
    async def find_by_id(self, loan_id: str) -> Optional[DeviceLoan]:
        """
        Find a device loan by its ID.

        Args:
            loan_id: Unique loan identifier

        Returns:
            DeviceLoan if found, None otherwise
        """

    @abstractmethod
    async def find_all(self) -> List[DeviceLoan]:
        """Find all device loans."""

    @abstractmethod
    async def save(self, loan: DeviceLoan) -> DeviceLoan:
        """
        Insert a device loan, or replace the one with the same ID.

        Args:
            loan: Device loan to store

        Returns:
            The loan as stored
        """

    @abstractmethod
    async def delete(self, loan_id: str) -> bool:
        """
        Delete a device loan.

        Args:
            loan_id: Unique loan identifier

        Returns:
            True if a loan was removed, False if none existed
        """

    @abstractmethod
    async def exists(self, loan_id: str) -> bool:
        """Check if a device loan exists."""

    @abstractmethod
    async def find_active(self) -> List[DeviceLoan]:
        """Find all loans with status 'active'."""

    @abstractmethod
    async def find_overdue(self, current_date: Optional[datetime] = None) -> List[DeviceLoan]:
        """
        Find active loans due before current_date.

        Args:
            current_date: Reference time; defaults to now

        Returns:
            List of overdue loans
        """

    @abstractmethod
    async def find_by_borrower_id(self, borrower_id: str) -> List[DeviceLoan]:
        """Find all loans belonging to a borrower."""

    @abstractmethod
    async def find_by_device_id(self, device_id: str) -> List[DeviceLoan]:
        """Find all loans for a device."""
