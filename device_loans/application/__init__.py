"""
Application Layer
=================

Application services and use cases.
This layer orchestrates domain entities and repositories.

Contains:
- Use Cases: Business operations (list products)
- Services: Application services that coordinate repository calls
- DTOs: Pydantic request/response models
"""
