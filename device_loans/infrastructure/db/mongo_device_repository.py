"""
Cosmos DB Device Repository
===========================

Concrete implementation of DeviceRepository for the device catalog.
"""
from typing import Any, Dict, List, Optional

from pymongo import ReturnDocument

from device_loans.core.errors import PersistenceError
from device_loans.domain.constants.device_fields import DeviceFields
from device_loans.domain.models.device import Device
from device_loans.domain.repositories.device_repository import DeviceRepository
from device_loans.infrastructure.db.cosmos_connection import CosmosClientManager
from device_loans.utils.datetime_utils import now, parse_iso, to_iso

_PROJECTION = {DeviceFields.MONGO_ID: False}


class MongoDeviceRepository(DeviceRepository):
    """Cosmos DB implementation of DeviceRepository."""

    def __init__(self, connection: CosmosClientManager, collection_name: Optional[str] = None):
        """Initialize repository with a client manager."""
        self._connection = connection
        self._collection = connection.get_collection(
            collection_name or connection.options.container_id
        )

    def _to_entity(self, doc: Dict[str, Any]) -> Device:
        """Convert stored document to Device entity."""
        return Device(
            id=doc[DeviceFields.ID],
            name=doc.get(DeviceFields.NAME, ""),
            category=doc.get(DeviceFields.CATEGORY, ""),
            condition=doc.get(DeviceFields.CONDITION, ""),
            available=bool(doc.get(DeviceFields.AVAILABLE, False)),
            created_at=parse_iso(doc.get(DeviceFields.CREATED_AT)) or now(),
        )

    def _to_document(self, device: Device) -> Dict[str, Any]:
        """Convert Device entity to stored document."""
        return {
            DeviceFields.ID: device.id,
            DeviceFields.NAME: device.name,
            DeviceFields.CATEGORY: device.category,
            DeviceFields.CONDITION: device.condition,
            DeviceFields.AVAILABLE: device.available,
            DeviceFields.CREATED_AT: to_iso(device.created_at),
        }

    async def save(self, device: Device) -> Device:
        """Insert or replace a device keyed by ID."""
        result = await self._collection.find_one_and_replace(
            {DeviceFields.ID: device.id},
            self._to_document(device),
            projection=_PROJECTION,
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
        if not result:
            raise PersistenceError("Failed to save Device", operation="save")
        return self._to_entity(result)

    async def find_all(self) -> List[Device]:
        """Find all devices."""
        docs = await self._collection.find({}, _PROJECTION).to_list(length=None)
        return [self._to_entity(doc) for doc in docs]

    async def find_by_id(self, device_id: str) -> Optional[Device]:
        """Find a device by its ID."""
        doc = await self._collection.find_one({DeviceFields.ID: device_id}, _PROJECTION)
        if not doc:
            return None
        return self._to_entity(doc)
