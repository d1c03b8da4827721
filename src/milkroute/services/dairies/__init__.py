"""Dairy lookup helpers."""

from .service import get_dairy, list_dairies, nearby_dairies, search_dairies

__all__ = [
    "list_dairies",
    "nearby_dairies",
    "search_dairies",
    "get_dairy",
]
