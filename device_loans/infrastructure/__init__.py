"""
Infrastructure Layer
====================

Concrete repository implementations over Cosmos DB (MongoDB API).
"""
