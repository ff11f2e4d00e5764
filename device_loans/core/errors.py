"""
Error Hierarchy
===============

Typed application errors. Each carries the code and HTTP status the API
layer reports, so handlers switch on the exception type instead of
inspecting message text.
"""
from typing import Any, Dict, Iterable, Optional


class DeviceLoansError(Exception):
    """Base exception for application-level failures."""

    code: str = "InternalServerError"
    http_status: int = 500

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_response(self) -> Dict[str, Any]:
        """Convert to the API error envelope."""
        error: Dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details is not None:
            error["details"] = self.details
        return {"success": False, "error": error}


class ConfigurationError(DeviceLoansError):
    """Required environment configuration is missing."""

    code = "MissingConfig"
    http_status = 400

    def __init__(self, missing: Iterable[str]):
        self.missing = tuple(missing)
        super().__init__(
            "Missing Cosmos configuration. Please ensure all of the following "
            f"environment variables are set: {', '.join(self.missing)}"
        )


class ResourceNotFoundError(DeviceLoansError):
    """Requested resource does not exist."""

    code = "NotFound"
    http_status = 404

    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(f"{resource_type} '{resource_id}' not found")
        self.resource_type = resource_type
        self.resource_id = resource_id


class PersistenceError(DeviceLoansError):
    """The store accepted a write but returned no document."""

    def __init__(self, message: str, operation: str):
        super().__init__(message)
        self.operation = operation
