"""Unit tests for individual components in isolation.

Coverage:
    - parsing/: Normalization and text extraction
    - sanitizing/: PDF and DOCX metadata removal
    - checking/: Chunking, dispatch and error handling
    - reporting/: Report summary, HTML rendering and bundling
"""
