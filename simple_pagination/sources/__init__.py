"""Paginated sources.

This module provides:
- InMemorySource strategies for sequences, sized iterables and streams
- DeferredQuery base class for externally executed queries
- CallableQuery and SQLAlchemyQuery deferred implementations
"""

from simple_pagination.sources.base import CallableQuery, DeferredQuery, InMemorySource
from simple_pagination.sources.memory import (
    RandomAccessSource,
    SizedIterableSource,
    StreamingSource,
    select_source,
)
from simple_pagination.sources.sqlalchemy import SQLAlchemyQuery

__all__ = [
    "CallableQuery",
    "DeferredQuery",
    "InMemorySource",
    "RandomAccessSource",
    "select_source",
    "SizedIterableSource",
    "SQLAlchemyQuery",
    "StreamingSource",
]
