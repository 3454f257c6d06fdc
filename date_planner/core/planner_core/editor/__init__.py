"""Event editing sessions."""

from .session import EditSession

__all__ = ["EditSession"]
