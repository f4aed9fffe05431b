"""Pagination entry points."""
