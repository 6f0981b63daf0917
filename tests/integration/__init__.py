"""Integration tests for the HTTP endpoints.

Runs the real FastAPI app through ASGITransport with generated documents.
Only the external checking service is stubbed.
"""
