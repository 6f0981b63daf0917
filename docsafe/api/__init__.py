"""FastAPI endpoints for DocSafe.

Endpoints:
    - GET /health: Service health status
    - POST /clean: Cleaned document (PDF/DOCX) with a *_cleaned suffix
    - POST /clean-v2: ZIP with the cleaned document, report.json and report.html
"""

from docsafe.api.app import app, create_app

__all__ = ["app", "create_app"]
