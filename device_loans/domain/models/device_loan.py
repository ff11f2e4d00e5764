"""
Device Loan Model
=================

Domain model for a device lent to a borrower for a bounded period.

Invariants are checked once, when the record is built:
- id, device_id and borrower_id are non-empty after trimming
- 1 <= loan_amount <= 10000 and the amount is finite
- start_date, due_date and created_at are datetimes, due_date > start_date
- dates are kept at millisecond precision, the precision they are stored at
- status is one of LoanStatus

validate_device_loan() reports every violated rule without raising.
create_device_loan() raises InvalidDeviceLoanError with the same messages
and never returns a partially valid record.
"""
import math
import numbers
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, List, Optional, Tuple

from device_loans.utils.datetime_utils import ensure_aware, truncate_to_millis


MIN_LOAN_AMOUNT = 1
MAX_LOAN_AMOUNT = 10000


class LoanStatus(str, Enum):
    ACTIVE = "active"
    RETURNED = "returned"
    OVERDUE = "overdue"


STATUS_VALUES: Tuple[str, ...] = tuple(status.value for status in LoanStatus)


@dataclass(frozen=True)
class DeviceLoan:
    """
    Device loan domain model.

    Immutable: a change is a new record saved over the old one.
    """
    id: str
    device_id: str
    borrower_id: str
    loan_amount: float
    start_date: datetime
    due_date: datetime
    status: LoanStatus
    created_at: datetime


class InvalidDeviceLoanError(ValueError):
    """Raised when a DeviceLoan cannot be built from the given values."""

    def __init__(self, errors: Tuple[str, ...]):
        self.errors = tuple(errors)
        super().__init__(f"Invalid device loan content: {', '.join(self.errors)}")


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validation: success, or every violated rule in check order."""
    errors: Tuple[str, ...] = ()

    @property
    def success(self) -> bool:
        return not self.errors


# Validation predicates (pure business rules)

def is_valid_device_id(device_id: Any) -> bool:
    return isinstance(device_id, str) and len(device_id.strip()) > 0


def is_valid_borrower_id(borrower_id: Any) -> bool:
    return isinstance(borrower_id, str) and len(borrower_id.strip()) > 0


def is_valid_loan_amount(amount: Any) -> bool:
    if isinstance(amount, bool) or not isinstance(amount, numbers.Real):
        return False
    return math.isfinite(amount) and MIN_LOAN_AMOUNT <= amount <= MAX_LOAN_AMOUNT


def is_valid_datetime(value: Any) -> bool:
    return isinstance(value, datetime)


def is_valid_dates(start_date: Any, due_date: Any) -> bool:
    if not (is_valid_datetime(start_date) and is_valid_datetime(due_date)):
        return False
    # Compared at stored (millisecond) precision
    return truncate_to_millis(ensure_aware(due_date)) > truncate_to_millis(ensure_aware(start_date))


def to_loan_status(status: Any) -> Optional[LoanStatus]:
    """Return the matching LoanStatus, or None for unrecognized values."""
    try:
        return LoanStatus(status)
    except (TypeError, ValueError):
        return None


def is_valid_status(status: Any) -> bool:
    return to_loan_status(status) is not None


def validate_device_loan_content(
    *,
    device_id: Any,
    borrower_id: Any,
    loan_amount: Any,
    start_date: Any,
    due_date: Any,
) -> ValidationResult:
    """Validate the loan terms (device, borrower, amount and dates)."""
    errors: List[str] = []

    if not is_valid_device_id(device_id):
        errors.append("Device ID must not be empty")

    if not is_valid_borrower_id(borrower_id):
        errors.append("Borrower ID must not be empty")

    if not is_valid_loan_amount(loan_amount):
        errors.append(
            f"Loan amount must be between {MIN_LOAN_AMOUNT} and {MAX_LOAN_AMOUNT}"
        )

    if not is_valid_dates(start_date, due_date):
        errors.append("Due date must be after start date and both must be valid dates")

    return ValidationResult(tuple(errors))


def validate_device_loan(
    *,
    id: Any,
    device_id: Any,
    borrower_id: Any,
    loan_amount: Any,
    start_date: Any,
    due_date: Any,
    status: Any,
    created_at: Any,
) -> ValidationResult:
    """
    Validate every field of a device loan.

    Never raises for malformed input; each failed rule adds one message.

    Returns:
        ValidationResult listing all violations (empty on success)
    """
    errors: List[str] = []

    if not isinstance(id, str) or len(id.strip()) == 0:
        errors.append("ID is required and cannot be empty")

    if not is_valid_datetime(created_at):
        errors.append("Created date must be a valid datetime")

    if not is_valid_status(status):
        errors.append(f"Status must be one of: {', '.join(STATUS_VALUES)}")

    content = validate_device_loan_content(
        device_id=device_id,
        borrower_id=borrower_id,
        loan_amount=loan_amount,
        start_date=start_date,
        due_date=due_date,
    )
    errors.extend(content.errors)

    return ValidationResult(tuple(errors))


def create_device_loan(
    *,
    id: str,
    device_id: str,
    borrower_id: str,
    loan_amount: float,
    start_date: datetime,
    due_date: datetime,
    status: Any,
    created_at: datetime,
) -> DeviceLoan:
    """
    Build a validated DeviceLoan.

    Raises:
        InvalidDeviceLoanError: With every violated rule, if any
    """
    result = validate_device_loan(
        id=id,
        device_id=device_id,
        borrower_id=borrower_id,
        loan_amount=loan_amount,
        start_date=start_date,
        due_date=due_date,
        status=status,
        created_at=created_at,
    )
    if not result.success:
        raise InvalidDeviceLoanError(result.errors)

    return DeviceLoan(
        id=id,
        device_id=device_id,
        borrower_id=borrower_id,
        loan_amount=loan_amount,
        start_date=truncate_to_millis(ensure_aware(start_date)),
        due_date=truncate_to_millis(ensure_aware(due_date)),
        status=LoanStatus(status),
        created_at=truncate_to_millis(ensure_aware(created_at)),
    )
