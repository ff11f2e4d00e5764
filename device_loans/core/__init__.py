"""
Core
====

Configuration, error types and logging setup shared by every layer.
"""
