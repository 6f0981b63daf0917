"""DocSafe - metadata removal and proofreading reports for PDF/DOCX documents.

Combines FastAPI for the HTTP surface, pypdf and zipfile for container
rewriting, httpx for the grammar-checking service, and Pydantic for
data validation.

Components:
    - api: HTTP endpoints for cleaning and report bundles
    - sanitizing: PDF/DOCX metadata removal
    - parsing: text extraction and normalization
    - checking: LanguageTool-compatible grammar-check client
    - reporting: report JSON/HTML rendering and ZIP bundling
    - models: domain and response schemas
"""

__version__ = "0.1.0"
