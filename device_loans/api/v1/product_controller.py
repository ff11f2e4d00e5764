"""
Product Controller
==================

FastAPI controller for the device catalog.
"""
import logging

from fastapi import APIRouter, Depends

from device_loans.api.v1.dependencies import get_list_products_use_case
from device_loans.application.dto.product_dto import ProductListResponse, ProductResponse
from device_loans.application.use_cases.list_products import ListProductsUseCase

logger = logging.getLogger(__name__)

router = APIRouter(tags=["products"])


@router.get(
    "/products",
    response_model=ProductListResponse,
    summary="List products",
    description="List every device in the catalog.",
)
async def list_products(
    use_case: ListProductsUseCase = Depends(get_list_products_use_case),
) -> ProductListResponse:
    """List all products."""
    logger.info("Handling GET /products request")
    products = await use_case.execute()
    data = [ProductResponse.from_entity(product) for product in products]
    return ProductListResponse(success=True, count=len(data), data=data)
