"""Document loading exports."""

from .document_reader import DocumentLoadError, load_schema, read_document

__all__ = ["DocumentLoadError", "load_schema", "read_document"]
