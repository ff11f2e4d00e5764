"""
API v1 Package
===============

Version 1 API controllers.
"""
from .product_controller import router as product_router
from .device_loan_controller import router as device_loan_router

__all__ = ["product_router", "device_loan_router"]
