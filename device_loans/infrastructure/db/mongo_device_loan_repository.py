"""
Cosmos DB Device Loan Repository
================================

Concrete implementation of DeviceLoanRepository over a Cosmos DB
(MongoDB API) collection. Dates are stored as ISO 8601 strings; every
other field is copied by name.
"""
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from pymongo import ReturnDocument

from device_loans.core.errors import PersistenceError
from device_loans.domain.constants.device_loan_fields import DeviceLoanFields
from device_loans.domain.models.device_loan import DeviceLoan, LoanStatus
from device_loans.domain.repositories.device_loan_repository import DeviceLoanRepository
from device_loans.infrastructure.db.cosmos_connection import CosmosClientManager
from device_loans.utils.datetime_utils import now, parse_iso, to_iso

logger = logging.getLogger(__name__)

# Keep the store's internal key out of every read
_PROJECTION = {DeviceLoanFields.MONGO_ID: False}


class MongoDeviceLoanRepository(DeviceLoanRepository):
    """
    Cosmos DB implementation of DeviceLoanRepository.

    Documents are keyed by the loan's own "id" field.
    """

    def __init__(self, connection: CosmosClientManager, collection_name: Optional[str] = None):
        """Initialize repository with a client manager."""
        self._connection = connection
        self._collection = connection.get_collection(
            collection_name or connection.options.loans_container_id
        )

    def _to_entity(self, doc: Dict[str, Any]) -> DeviceLoan:
        """
        Convert stored document to DeviceLoan entity.

        Raises:
            KeyError: If a field is missing
            ValueError: If a date or the status cannot be read
        """
        dates = {}
        for field in (DeviceLoanFields.START_DATE, DeviceLoanFields.DUE_DATE, DeviceLoanFields.CREATED_AT):
            value = parse_iso(doc[field])
            if value is None:
                raise ValueError(f"{field} is not an ISO 8601 date: {doc[field]!r}")
            dates[field] = value

        return DeviceLoan(
            id=doc[DeviceLoanFields.ID],
            device_id=doc[DeviceLoanFields.DEVICE_ID],
            borrower_id=doc[DeviceLoanFields.BORROWER_ID],
            loan_amount=doc[DeviceLoanFields.LOAN_AMOUNT],
            start_date=dates[DeviceLoanFields.START_DATE],
            due_date=dates[DeviceLoanFields.DUE_DATE],
            status=LoanStatus(doc[DeviceLoanFields.STATUS]),
            created_at=dates[DeviceLoanFields.CREATED_AT],
        )

    def _read_entity(self, doc: Dict[str, Any]) -> Optional[DeviceLoan]:
        """Convert a read document, or log and return None if it cannot be mapped."""
        try:
            return self._to_entity(doc)
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(
                "Skipping unreadable device loan document %s: %s",
                doc.get(DeviceLoanFields.ID), e,
            )
            return None

    def _to_document(self, loan: DeviceLoan) -> Dict[str, Any]:
        """Convert DeviceLoan entity to stored document."""
        return {
            DeviceLoanFields.ID: loan.id,
            DeviceLoanFields.DEVICE_ID: loan.device_id,
            DeviceLoanFields.BORROWER_ID: loan.borrower_id,
            DeviceLoanFields.LOAN_AMOUNT: loan.loan_amount,
            DeviceLoanFields.START_DATE: to_iso(loan.start_date),
            DeviceLoanFields.DUE_DATE: to_iso(loan.due_date),
            DeviceLoanFields.STATUS: loan.status.value,
            DeviceLoanFields.CREATED_AT: to_iso(loan.created_at),
        }

    async def _find_many(self, query: Dict[str, Any]) -> List[DeviceLoan]:
        cursor = self._collection.find(query, _PROJECTION)
        docs = await cursor.to_list(length=None)
        loans = (self._read_entity(doc) for doc in docs)
        return [loan for loan in loans if loan is not None]

    async def find_by_id(self, loan_id: str) -> Optional[DeviceLoan]:
        """Find a device loan by its ID."""
        doc = await self._collection.find_one({DeviceLoanFields.ID: loan_id}, _PROJECTION)
        if not doc:
            return None
        return self._read_entity(doc)

    async def find_all(self) -> List[DeviceLoan]:
        """Find all device loans."""
        return await self._find_many({})

    async def save(self, loan: DeviceLoan) -> DeviceLoan:
        """Insert or replace a device loan keyed by ID."""
        doc = self._to_document(loan)
        result = await self._collection.find_one_and_replace(
            {DeviceLoanFields.ID: loan.id},
            doc,
            projection=_PROJECTION,
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
        if not result:
            raise PersistenceError("Failed to save DeviceLoan", operation="save")

        logger.debug("Saved device loan %s", loan.id)
        return self._to_entity(result)

    async def delete(self, loan_id: str) -> bool:
        """Delete a device loan by ID."""
        result = await self._collection.delete_one({DeviceLoanFields.ID: loan_id})
        return result.deleted_count > 0

    async def exists(self, loan_id: str) -> bool:
        """Check if a device loan exists."""
        doc = await self._collection.find_one({DeviceLoanFields.ID: loan_id}, _PROJECTION)
        return doc is not None

    async def find_active(self) -> List[DeviceLoan]:
        """Find all active loans."""
        return await self._find_many({DeviceLoanFields.STATUS: LoanStatus.ACTIVE.value})

    async def find_overdue(self, current_date: Optional[datetime] = None) -> List[DeviceLoan]:
        """Find active loans whose due date is before current_date."""
        cutoff = to_iso(current_date if current_date is not None else now())
        return await self._find_many({
            DeviceLoanFields.STATUS: LoanStatus.ACTIVE.value,
            DeviceLoanFields.DUE_DATE: {"$lt": cutoff},
        })

    async def find_by_borrower_id(self, borrower_id: str) -> List[DeviceLoan]:
        """Find all loans for a borrower."""
        return await self._find_many({DeviceLoanFields.BORROWER_ID: borrower_id})

    async def find_by_device_id(self, device_id: str) -> List[DeviceLoan]:
        """Find all loans for a device."""
        return await self._find_many({DeviceLoanFields.DEVICE_ID: device_id})
