import logging
from typing import TYPE_CHECKING

from ...core.config import Settings
from ...infrastructure.db.cosmos_connection import CosmosClientManager

if TYPE_CHECKING:
    from ..base_container import BaseContainer

logger = logging.getLogger(__name__)


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""

    CLIENT_KEY = "cosmos_client"

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the Cosmos client manager.
        Configuration is checked when the client is first requested,
        so a missing variable raises ConfigurationError before any
        network call.
        """
        def build_client() -> CosmosClientManager:
            options = container.get(Settings).require_cosmos()
            logger.info(
                "Cosmos repositories configured: endpoint=%s database=%s "
                "container=%s loans_container=%s",
                options.host,
                options.database_id,
                options.container_id,
                options.loans_container_id,
            )
            return CosmosClientManager(options)

        container.register_lazy_singleton(DatabaseProvider.CLIENT_KEY, build_client)
