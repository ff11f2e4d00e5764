# Local application imports
from device_loans.core.config import Settings
from device_loans.infrastructure.db.cosmos_connection import CosmosClientManager
from .base_container import BaseContainer
from .providers import (
    DatabaseProvider,
    RepositoryProvider,
    DeviceLoanProvider,
    ProductProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    One container is built per application and kept on app.state.
    Registrations are lazy: nothing touches configuration or the
    store until a handler first asks for a repository.

    Registration order:
    1. Database connections (DatabaseProvider)
    2. Repositories (RepositoryProvider) - depends on database
    3. Services (DeviceLoanProvider, ProductProvider) - depend on repositories
    """

    def __init__(self, settings: Settings) -> None:
        super().__init__()
        self.settings = settings
        self.setup()

    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database → repositories → services
        """
        self.register_singleton(Settings, self.settings)

        DatabaseProvider.register(self)
        RepositoryProvider.register(self)
        DeviceLoanProvider.register(self)
        ProductProvider.register(self)

    async def close(self) -> None:
        """Close the store client if it was ever created."""
        if self.is_initialized(DatabaseProvider.CLIENT_KEY):
            client: CosmosClientManager = self.get(DatabaseProvider.CLIENT_KEY)
            await client.close()
