"""Integration tests for the upload endpoints.

Runs the real FastAPI app through httpx's ASGI transport, no mocks.
"""
