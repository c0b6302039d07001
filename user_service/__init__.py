"""
EcoMarket User Service: root package.

This package contains the FastAPI app entry point (main.py), the users API,
the user domain (entity, repository port, conflict errors), use cases and
the MongoDB / in-memory user stores.
"""
