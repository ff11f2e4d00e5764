"""
Device Loan DTO
===============

Pydantic models for device loan API requests and responses.
Field names are camelCase on the wire.
"""
from datetime import datetime
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from device_loans.domain.models.device_loan import DeviceLoan
from device_loans.domain.queries import calculate_loan_duration_days


class DeviceLoanUpsertRequest(BaseModel):
    """DTO for creating or replacing a device loan.

    Domain rules (amount range, date order, status) are checked by the
    domain factory so that every violation is reported together.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "deviceId": "p1",
                "borrowerId": "b-1001",
                "loanAmount": 250,
                "startDate": "2025-12-01T09:00:00.000Z",
                "dueDate": "2025-12-15T09:00:00.000Z",
                "status": "active",
            }
        },
    )

    device_id: str = Field(..., description="Catalog ID of the lent device")
    borrower_id: str = Field(..., description="Borrower directory ID")
    loan_amount: Union[int, float] = Field(..., description="Loan amount, 1 to 10000")
    start_date: datetime
    due_date: datetime
    status: str = Field("active", description="active | returned | overdue")
    created_at: Optional[datetime] = Field(None, description="Defaults to now")


class DeviceLoanResponse(BaseModel):
    """DTO for device loan data."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    device_id: str
    borrower_id: str
    loan_amount: Union[int, float]
    start_date: datetime
    due_date: datetime
    status: str
    created_at: datetime
    duration_days: int

    @classmethod
    def from_entity(cls, loan: DeviceLoan) -> "DeviceLoanResponse":
        return cls(
            id=loan.id,
            device_id=loan.device_id,
            borrower_id=loan.borrower_id,
            loan_amount=loan.loan_amount,
            start_date=loan.start_date,
            due_date=loan.due_date,
            status=loan.status.value,
            created_at=loan.created_at,
            duration_days=calculate_loan_duration_days(loan),
        )


class DeviceLoanListResponse(BaseModel):
    success: bool = True
    count: int
    data: List[DeviceLoanResponse]


class DeviceLoanItemResponse(BaseModel):
    success: bool = True
    data: DeviceLoanResponse


class DeleteResult(BaseModel):
    deleted: bool


class DeviceLoanDeleteResponse(BaseModel):
    success: bool = True
    data: DeleteResult
