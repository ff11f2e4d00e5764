"""
Device Loan Queries
===================

Pure filters and sorts over already-loaded loans.
None of these mutate their input; each returns a new list.
"""
from datetime import datetime, timedelta
from typing import List, Optional, Sequence

from device_loans.domain.models.device_loan import DeviceLoan, LoanStatus
from device_loans.utils.datetime_utils import ensure_aware, now

_SORT_ORDERS = ("asc", "desc")
_DAY_MS = 24 * 60 * 60 * 1000


def get_active_loans(loans: Sequence[DeviceLoan]) -> List[DeviceLoan]:
    return [loan for loan in loans if loan.status == LoanStatus.ACTIVE]


def get_overdue_loans(
    loans: Sequence[DeviceLoan],
    current_date: Optional[datetime] = None,
) -> List[DeviceLoan]:
    """
    Active loans whose due date is strictly before current_date.

    Args:
        loans: Loans to filter
        current_date: Reference time; defaults to now at call time

    Returns:
        Overdue loans in their original order
    """
    reference = ensure_aware(current_date) if current_date is not None else now()
    return [
        loan for loan in loans
        if loan.status == LoanStatus.ACTIVE and reference > loan.due_date
    ]


def _is_descending(order: str) -> bool:
    if order not in _SORT_ORDERS:
        raise ValueError(f"Sort order must be one of: {', '.join(_SORT_ORDERS)}")
    return order == "desc"


def sort_by_due_date(loans: Sequence[DeviceLoan], order: str = "asc") -> List[DeviceLoan]:
    # sorted() is stable for reverse=True as well, so ties keep input order
    return sorted(loans, key=lambda loan: loan.due_date, reverse=_is_descending(order))


def sort_by_start_date(loans: Sequence[DeviceLoan], order: str = "asc") -> List[DeviceLoan]:
    return sorted(loans, key=lambda loan: loan.start_date, reverse=_is_descending(order))


def calculate_loan_duration_days(loan: DeviceLoan) -> int:
    """Whole days from start to due date; any partial day counts as a full day."""
    elapsed_ms = (loan.due_date - loan.start_date) // timedelta(milliseconds=1)
    return -(-elapsed_ms // _DAY_MS)
