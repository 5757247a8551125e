"""File I/O related utilities.

This package groups small modules that read schema and instance documents and
render file-backed reports.
"""

from .document_loader import DocumentLoader, check_schema, document_loader
from .template_renderer import TemplateRenderer

__all__ = [
    "DocumentLoader",
    "check_schema",
    "document_loader",
    "TemplateRenderer",
]
