"""Shared helpers."""

from .dates import parse_date, format_date, to_storage, from_storage, INVALID_DATE

__all__ = ["parse_date", "format_date", "to_storage", "from_storage", "INVALID_DATE"]
