# Standard library imports
import os
from dataclasses import dataclass
from typing import Final, Optional, Tuple
from urllib.parse import urlsplit

from dotenv import load_dotenv

from device_loans.core.errors import ConfigurationError


REQUIRED_COSMOS_VARIABLES: Final[Tuple[str, ...]] = (
    "COSMOS_KEY",
    "COSMOS_ENDPOINT",
    "COSMOS_DATABASE",
    "COSMOS_CONTAINER",
)


@dataclass(frozen=True)
class CosmosOptions:
    """Connection details for the Cosmos DB (MongoDB API) account."""
    endpoint: str
    key: str
    database_id: str
    container_id: str
    loans_container_id: str
    username: str

    @property
    def host(self) -> str:
        """Endpoint host without credentials or query string."""
        return urlsplit(self.endpoint).hostname or self.endpoint


class Settings:
    """
    Application settings loaded from environment variables.

    Cosmos DB values are read eagerly but only checked when a repository
    is first requested, so the API can start without them and report
    the missing configuration per request.
    """

    def __init__(self) -> None:
        # Load environment variables from .env file
        load_dotenv()

        # Runtime environment ("development" exposes error details)
        self.environment: Final[str] = os.getenv("APP_ENV", "production")

        # Timezone Configuration
        # Default to UTC, but can be set via TIMEZONE env var (e.g., "UTC", "Europe/Berlin")
        self.timezone: Final[str] = os.getenv("TIMEZONE", "UTC")

        # Logging
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO")
        self.log_format: Final[str] = os.getenv("LOG_FORMAT", "text")

        # Cosmos DB Configuration
        self.cosmos_key: Final[Optional[str]] = os.getenv("COSMOS_KEY")
        self.cosmos_endpoint: Final[Optional[str]] = os.getenv("COSMOS_ENDPOINT")
        self.cosmos_database: Final[Optional[str]] = os.getenv("COSMOS_DATABASE")
        self.cosmos_container: Final[Optional[str]] = os.getenv("COSMOS_CONTAINER")
        self.cosmos_username: Final[Optional[str]] = os.getenv("COSMOS_USERNAME")

        # Collection Names
        self.cosmos_loans_container: Final[str] = os.getenv(
            "COSMOS_LOANS_CONTAINER",
            "deviceLoans"
        )

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"

    def missing_cosmos_variables(self) -> Tuple[str, ...]:
        """Names of required Cosmos variables that are unset or blank."""
        values = {
            "COSMOS_KEY": self.cosmos_key,
            "COSMOS_ENDPOINT": self.cosmos_endpoint,
            "COSMOS_DATABASE": self.cosmos_database,
            "COSMOS_CONTAINER": self.cosmos_container,
        }
        return tuple(
            name for name in REQUIRED_COSMOS_VARIABLES
            if not (values[name] or "").strip()
        )

    def require_cosmos(self) -> CosmosOptions:
        """
        Build Cosmos connection options.

        Returns:
            CosmosOptions with every required value present

        Raises:
            ConfigurationError: If any required variable is missing
        """
        missing = self.missing_cosmos_variables()
        if missing:
            raise ConfigurationError(missing)

        endpoint = self.cosmos_endpoint.strip()
        username = self.cosmos_username or _account_name(endpoint)
        return CosmosOptions(
            endpoint=endpoint,
            key=self.cosmos_key,
            database_id=self.cosmos_database.strip(),
            container_id=self.cosmos_container.strip(),
            loans_container_id=self.cosmos_loans_container.strip(),
            username=username,
        )


def _account_name(endpoint: str) -> str:
    # acct.mongo.cosmos.azure.com -> acct
    host = urlsplit(endpoint).hostname or endpoint
    return host.split(".", 1)[0]


# Process-wide settings, created on first use
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
