"""
Providers Package
=================

Dependency injection providers for registering dependencies.
"""
from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .device_loan_provider import DeviceLoanProvider
from .product_provider import ProductProvider

__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "DeviceLoanProvider",
    "ProductProvider",
]
