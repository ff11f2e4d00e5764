"""Constants for Device document field names"""


class DeviceFields:
    """Field name constants for stored Device documents"""
    ID = "id"
    NAME = "name"
    CATEGORY = "category"
    CONDITION = "condition"
    AVAILABLE = "available"
    CREATED_AT = "createdAt"

    # MongoDB specific
    MONGO_ID = "_id"
