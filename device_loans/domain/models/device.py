"""
Device Model
============

Catalog record for a lendable device, listed by GET /products.
This is a pure domain object with no infrastructure dependencies.
"""
from dataclasses import dataclass, field
from datetime import datetime

from device_loans.utils.datetime_utils import now


@dataclass(frozen=True)
class Device:
    """
    Device domain model.

    Unlike DeviceLoan, catalog records carry no validation rules.
    """
    id: str
    name: str
    category: str
    condition: str
    available: bool = True
    created_at: datetime = field(default_factory=lambda: now())
