"""Core utilities and shared components for b2fs."""

from .config import settings
from .exceptions import B2FSError, InvalidQueryError, ValidationError
from .observability import get_logger, get_tracer

__all__ = [
    "settings",
    "B2FSError",
    "InvalidQueryError",
    "ValidationError",
    "get_logger",
    "get_tracer",
]
