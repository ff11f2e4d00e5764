"""
Device Loans API
================

HTTP API for device loans and the device catalog, persisted in
Azure Cosmos DB through its MongoDB-compatible endpoint.
"""
