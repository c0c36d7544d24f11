"""
RTF Preview Service package.

This module provides a FastAPI application that fetches RTF documents from an
allow-listed origin and renders them as standalone HTML pages. The preview
endpoint is available at `/?url=...`.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
