"""
Cosmos DB Client
================

Owns the async MongoDB client for a Cosmos DB (MongoDB API) account and
hands out collections. Constructing the manager does no network I/O;
the driver connects on the first operation.
"""
import logging
from typing import Optional

from pymongo import AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.asynchronous.database import AsyncDatabase

from device_loans.core.config import CosmosOptions

logger = logging.getLogger(__name__)


class CosmosClientManager:
    """
    Cosmos DB client manager.

    One instance is created per application container and shared by
    every repository.
    """

    def __init__(self, options: CosmosOptions, client: Optional[AsyncMongoClient] = None):
        self._options = options
        self._client: Optional[AsyncMongoClient] = client
        self._database: Optional[AsyncDatabase] = None

    @property
    def options(self) -> CosmosOptions:
        return self._options

    def _initialize_client(self) -> None:
        """Initialize the driver client."""
        if self._client is None:
            self._client = AsyncMongoClient(
                self._options.endpoint,
                username=self._options.username,
                password=self._options.key,
                retryWrites=False,
                appname="device-loans-api",
            )
        self._database = self._client[self._options.database_id]
        logger.info(
            "Cosmos client initialized: endpoint=%s database=%s",
            self._options.host,
            self._options.database_id,
        )

    def get_database(self) -> AsyncDatabase:
        """Get the configured database."""
        if self._database is None:
            self._initialize_client()
        return self._database

    def get_collection(self, collection_name: str) -> AsyncCollection:
        """
        Get a collection (a Cosmos container).

        Args:
            collection_name: Name of the collection

        Returns:
            Async collection handle
        """
        return self.get_database()[collection_name]

    async def close(self) -> None:
        """Close the client connection."""
        if self._client is not None:
            await self._client.close()
            self._client = None
            self._database = None
