"""Application container: lazy, initialize-once repositories."""

import threading
import time

import pytest

from device_loans.application.services.device_loan_service import DeviceLoanService
from device_loans.application.use_cases.list_products import ListProductsUseCase
from device_loans.core.errors import ConfigurationError
from device_loans.di.base_container import BaseContainer
from device_loans.di.container import DIContainer
from device_loans.di.providers import DatabaseProvider
from device_loans.domain.repositories.device_loan_repository import DeviceLoanRepository
from device_loans.infrastructure.db.cosmos_connection import CosmosClientManager
from device_loans.infrastructure.db.mongo_device_loan_repository import MongoDeviceLoanRepository


def test_building_container_does_not_touch_configuration(unconfigured_settings):
    container = DIContainer(unconfigured_settings)
    assert not container.is_initialized(DatabaseProvider.CLIENT_KEY)


def test_missing_configuration_fails_on_first_repository_access(unconfigured_settings):
    container = DIContainer(unconfigured_settings)
    with pytest.raises(ConfigurationError) as exc_info:
        container.get(DeviceLoanRepository)
    assert exc_info.value.missing == (
        "COSMOS_KEY", "COSMOS_ENDPOINT", "COSMOS_DATABASE", "COSMOS_CONTAINER",
    )
    assert not container.is_initialized(DeviceLoanRepository)


def test_client_manager_built_from_configuration(configured_settings):
    container = DIContainer(configured_settings)
    client = container.get(DatabaseProvider.CLIENT_KEY)
    assert isinstance(client, CosmosClientManager)
    assert client.options.database_id == "loans-db"
    assert client.options.username == "loans-acct"


def test_services_share_one_repository(configured_settings, fake_connection):
    container = DIContainer(configured_settings)
    container.register_singleton(DatabaseProvider.CLIENT_KEY, fake_connection)

    service = container.get(DeviceLoanService)
    repository = container.get(DeviceLoanRepository)

    assert isinstance(repository, MongoDeviceLoanRepository)
    assert container.get(DeviceLoanService) is service
    assert container.get(ListProductsUseCase) is container.get(ListProductsUseCase)


def test_lazy_singleton_constructed_once_under_concurrency():
    container = BaseContainer()
    calls = []

    def factory():
        calls.append(1)
        time.sleep(0.05)
        return object()

    container.register_lazy_singleton("thing", factory)
    results = []
    threads = [
        threading.Thread(target=lambda: results.append(container.get("thing")))
        for _ in range(8)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(calls) == 1
    assert len({id(result) for result in results}) == 1


def test_failed_lazy_construction_is_retried():
    container = BaseContainer()
    attempts = []

    def factory():
        attempts.append(1)
        if len(attempts) == 1:
            raise RuntimeError("not yet")
        return "ready"

    container.register_lazy_singleton("thing", factory)
    with pytest.raises(RuntimeError):
        container.get("thing")
    assert container.get("thing") == "ready"


def test_unknown_registration_raises():
    with pytest.raises(ValueError):
        BaseContainer().get("missing")


@pytest.mark.asyncio
async def test_close_releases_client(configured_settings, fake_connection):
    container = DIContainer(configured_settings)
    await container.close()

    container.register_singleton(DatabaseProvider.CLIENT_KEY, fake_connection)
    await container.close()
    assert fake_connection.closed
