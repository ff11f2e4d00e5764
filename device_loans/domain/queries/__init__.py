from .device_loan_queries import (
    calculate_loan_duration_days,
    get_active_loans,
    get_overdue_loans,
    sort_by_due_date,
    sort_by_start_date,
)

__all__ = [
    "calculate_loan_duration_days",
    "get_active_loans",
    "get_overdue_loans",
    "sort_by_due_date",
    "sort_by_start_date",
]
