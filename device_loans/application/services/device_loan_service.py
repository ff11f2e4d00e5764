"""
Device Loan Service
===================

Application service that coordinates device loan operations.
"""
import logging
from datetime import datetime
from typing import List, Optional

from device_loans.core.errors import ResourceNotFoundError
from device_loans.domain.models.device_loan import DeviceLoan, create_device_loan
from device_loans.domain.queries import sort_by_due_date, sort_by_start_date
from device_loans.domain.repositories.device_loan_repository import DeviceLoanRepository
from device_loans.utils.datetime_utils import now

logger = logging.getLogger(__name__)

SORT_FIELDS = ("dueDate", "startDate")


class DeviceLoanService:
    """
    Application service for device loan operations.

    Validation happens in the domain factory; this service only decides
    which repository call to make.
    """

    def __init__(self, device_loan_repository: DeviceLoanRepository):
        """
        Initialize service with repository.

        Args:
            device_loan_repository: Repository for loan persistence
        """
        self._repository = device_loan_repository

    async def get_loan(self, loan_id: str) -> DeviceLoan:
        """
        Get a loan by ID.

        Raises:
            ResourceNotFoundError: If no loan has this ID
        """
        loan = await self._repository.find_by_id(loan_id)
        if loan is None:
            raise ResourceNotFoundError("DeviceLoan", loan_id)
        return loan

    async def list_loans(
        self,
        sort_by: Optional[str] = None,
        order: str = "asc",
    ) -> List[DeviceLoan]:
        """
        List all loans, optionally sorted by "dueDate" or "startDate".

        Raises:
            ValueError: If sort_by or order is not recognized
        """
        loans = await self._repository.find_all()
        if sort_by is None:
            return loans
        if sort_by == "dueDate":
            return sort_by_due_date(loans, order)
        if sort_by == "startDate":
            return sort_by_start_date(loans, order)
        raise ValueError(f"Sort field must be one of: {', '.join(SORT_FIELDS)}")

    async def list_active(self) -> List[DeviceLoan]:
        return await self._repository.find_active()

    async def list_overdue(self, as_of: Optional[datetime] = None) -> List[DeviceLoan]:
        return await self._repository.find_overdue(as_of)

    async def list_by_borrower(self, borrower_id: str) -> List[DeviceLoan]:
        return await self._repository.find_by_borrower_id(borrower_id)

    async def list_by_device(self, device_id: str) -> List[DeviceLoan]:
        return await self._repository.find_by_device_id(device_id)

    async def upsert_loan(
        self,
        loan_id: str,
        device_id: str,
        borrower_id: str,
        loan_amount: float,
        start_date: datetime,
        due_date: datetime,
        status: str,
        created_at: Optional[datetime] = None,
    ) -> DeviceLoan:
        """
        Create a loan or replace the existing one with the same ID.

        Raises:
            InvalidDeviceLoanError: If any domain rule is violated
        """
        loan = create_device_loan(
            id=loan_id,
            device_id=device_id,
            borrower_id=borrower_id,
            loan_amount=loan_amount,
            start_date=start_date,
            due_date=due_date,
            status=status,
            created_at=created_at if created_at is not None else now(),
        )
        saved = await self._repository.save(loan)
        logger.info("Device loan %s saved with status %s", saved.id, saved.status.value)
        return saved

    async def delete_loan(self, loan_id: str) -> bool:
        """Delete a loan. Returns False when nothing was stored under loan_id."""
        deleted = await self._repository.delete(loan_id)
        if deleted:
            logger.info("Device loan %s deleted", loan_id)
        return deleted
