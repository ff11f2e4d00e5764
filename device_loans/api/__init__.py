"""
API/Presentation Layer
======================

HTTP API layer using FastAPI.
This layer handles HTTP requests and responses.

Contains:
- Controllers: FastAPI route handlers
- Dependencies: Resolution of services from the application container
- Error handlers: Mapping of typed errors to the response envelope
"""
