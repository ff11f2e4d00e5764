"""
Dependencies
============

FastAPI dependencies resolving services from the application's
container (app.state.container). Nothing here is module-global, so each
application instance, including those built in tests, owns its own
repositories.
"""
from fastapi import Depends, Request

from device_loans.application.services.device_loan_service import DeviceLoanService
from device_loans.application.use_cases.list_products import ListProductsUseCase
from device_loans.di.container import DIContainer


async def get_container(request: Request) -> DIContainer:
    """Return the container owned by the running application."""
    return request.app.state.container


async def get_list_products_use_case(
    container: DIContainer = Depends(get_container),
) -> ListProductsUseCase:
    """
    Get the list-products use case.

    Raises:
        ConfigurationError: If Cosmos configuration is missing
    """
    return container.get(ListProductsUseCase)


async def get_device_loan_service(
    container: DIContainer = Depends(get_container),
) -> DeviceLoanService:
    """
    Get device loan service instance.

    Raises:
        ConfigurationError: If Cosmos configuration is missing
    """
    return container.get(DeviceLoanService)
