"""
Device Loan Controller
======================

FastAPI controller for device loan endpoints.
Errors are translated to the response envelope by the handlers in
device_loans.api.error_handlers.
"""
from datetime import datetime
from typing import List, Literal, Optional

from fastapi import APIRouter, Depends, Query

from device_loans.api.v1.dependencies import get_device_loan_service
from device_loans.application.dto.device_loan_dto import (
    DeleteResult,
    DeviceLoanDeleteResponse,
    DeviceLoanItemResponse,
    DeviceLoanListResponse,
    DeviceLoanResponse,
    DeviceLoanUpsertRequest,
)
from device_loans.application.services.device_loan_service import DeviceLoanService
from device_loans.domain.models.device_loan import DeviceLoan

router = APIRouter(tags=["loans"])


def _list_response(loans: List[DeviceLoan]) -> DeviceLoanListResponse:
    data = [DeviceLoanResponse.from_entity(loan) for loan in loans]
    return DeviceLoanListResponse(success=True, count=len(data), data=data)


@router.get(
    "",
    response_model=DeviceLoanListResponse,
    summary="List device loans",
    description="List all loans, optionally sorted by due or start date.",
)
async def list_loans(
    sort_by: Optional[Literal["dueDate", "startDate"]] = Query(None, alias="sortBy"),
    order: Literal["asc", "desc"] = Query("asc"),
    service: DeviceLoanService = Depends(get_device_loan_service),
) -> DeviceLoanListResponse:
    return _list_response(await service.list_loans(sort_by=sort_by, order=order))


@router.get("/active", response_model=DeviceLoanListResponse, summary="List active loans")
async def list_active_loans(
    service: DeviceLoanService = Depends(get_device_loan_service),
) -> DeviceLoanListResponse:
    return _list_response(await service.list_active())


@router.get(
    "/overdue",
    response_model=DeviceLoanListResponse,
    summary="List overdue loans",
    description="Active loans due before asOf (defaults to now).",
)
async def list_overdue_loans(
    as_of: Optional[datetime] = Query(None, alias="asOf"),
    service: DeviceLoanService = Depends(get_device_loan_service),
) -> DeviceLoanListResponse:
    return _list_response(await service.list_overdue(as_of))


@router.get("/by-borrower/{borrower_id}", response_model=DeviceLoanListResponse)
async def list_loans_by_borrower(
    borrower_id: str,
    service: DeviceLoanService = Depends(get_device_loan_service),
) -> DeviceLoanListResponse:
    return _list_response(await service.list_by_borrower(borrower_id))


@router.get("/by-device/{device_id}", response_model=DeviceLoanListResponse)
async def list_loans_by_device(
    device_id: str,
    service: DeviceLoanService = Depends(get_device_loan_service),
) -> DeviceLoanListResponse:
    return _list_response(await service.list_by_device(device_id))


@router.get("/{loan_id}", response_model=DeviceLoanItemResponse, summary="Get loan by ID")
async def get_loan(
    loan_id: str,
    service: DeviceLoanService = Depends(get_device_loan_service),
) -> DeviceLoanItemResponse:
    loan = await service.get_loan(loan_id)
    return DeviceLoanItemResponse(success=True, data=DeviceLoanResponse.from_entity(loan))


@router.put(
    "/{loan_id}",
    response_model=DeviceLoanItemResponse,
    summary="Create or replace a device loan",
    description="""
    Upsert a loan keyed by ID.

    Every violated rule is reported in error.details; nothing is stored
    unless the loan is valid.
    """,
)
async def upsert_loan(
    loan_id: str,
    request: DeviceLoanUpsertRequest,
    service: DeviceLoanService = Depends(get_device_loan_service),
) -> DeviceLoanItemResponse:
    loan = await service.upsert_loan(
        loan_id=loan_id,
        device_id=request.device_id,
        borrower_id=request.borrower_id,
        loan_amount=request.loan_amount,
        start_date=request.start_date,
        due_date=request.due_date,
        status=request.status,
        created_at=request.created_at,
    )
    return DeviceLoanItemResponse(success=True, data=DeviceLoanResponse.from_entity(loan))


@router.delete("/{loan_id}", response_model=DeviceLoanDeleteResponse, summary="Delete a loan")
async def delete_loan(
    loan_id: str,
    service: DeviceLoanService = Depends(get_device_loan_service),
) -> DeviceLoanDeleteResponse:
    deleted = await service.delete_loan(loan_id)
    return DeviceLoanDeleteResponse(success=True, data=DeleteResult(deleted=deleted))
