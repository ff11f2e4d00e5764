"""
Domain Layer
============

Core business logic and domain models.
This layer has no dependencies on external frameworks or infrastructure.

Contains:
- Entities: Domain models representing business concepts
- Queries: Pure filters and sorts over loaded records
- Repository Interfaces: Abstract contracts for data access
"""
