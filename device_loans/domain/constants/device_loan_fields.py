"""Constants for DeviceLoan document field names"""


class DeviceLoanFields:
    """Field name constants for stored DeviceLoan documents"""
    ID = "id"
    DEVICE_ID = "deviceId"
    BORROWER_ID = "borrowerId"
    LOAN_AMOUNT = "loanAmount"
    START_DATE = "startDate"
    DUE_DATE = "dueDate"
    STATUS = "status"
    CREATED_AT = "createdAt"

    # MongoDB specific
    MONGO_ID = "_id"  # Store's internal key, never exposed
