"""
Product DTO
===========

Pydantic models for GET /products responses.
"""
from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from device_loans.domain.models.device import Device


class ProductResponse(BaseModel):
    """DTO for a device catalog record."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": "p1",
                "name": "Lenovo ThinkPad X1 Carbon",
                "category": "Laptops",
                "condition": "good",
                "available": True,
                "createdAt": "2025-12-20T09:11:50.840Z",
            }
        },
    )

    id: str
    name: str
    category: str
    condition: str
    available: bool
    created_at: datetime

    @classmethod
    def from_entity(cls, device: Device) -> "ProductResponse":
        return cls(
            id=device.id,
            name=device.name,
            category=device.category,
            condition=device.condition,
            available=device.available,
            created_at=device.created_at,
        )


class ProductListResponse(BaseModel):
    """Envelope for the product list."""
    success: bool = True
    count: int
    data: List[ProductResponse]
