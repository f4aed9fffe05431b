"""Bounds-safe pagination for in-memory sources and deferred queries.

This package provides:
- paginate() for sequences and iterables
- paginate_async() for deferred queries (SQLAlchemy or custom engines)
- Page, the immutable page result
- pydantic/FastAPI helpers for exposing pages over an API
"""

from simple_pagination.core.errors import InvalidArgumentError, PaginationError
from simple_pagination.core.normalization import NormalizedRange, normalize
from simple_pagination.core.page import Page
from simple_pagination.services.paginator import paginate, paginate_async
from simple_pagination.sources.base import CallableQuery, DeferredQuery

__all__ = [
    "CallableQuery",
    "DeferredQuery",
    "InvalidArgumentError",
    "normalize",
    "NormalizedRange",
    "Page",
    "paginate",
    "paginate_async",
    "PaginationError",
]
