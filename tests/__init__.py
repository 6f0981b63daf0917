"""Test package for DocSafe.

Structure:
    - unit/: Individual function and class tests
    - integration/: HTTP endpoint tests through the ASGI app

Documents are generated in memory (builders.py); the checking service is
replaced with an httpx MockTransport stub.
Leverages pytest with pytest-check for soft assertions.
"""
