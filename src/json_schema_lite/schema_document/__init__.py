"""Schema document exports."""

from .json_schema import Schema

__all__ = ["Schema"]
