"""Query classes for sclookup."""

from .base import Query
from .lookup import LookupQuery, resolve
from .references import ReferencesQuery, decode

__all__ = [
    "Query",
    "LookupQuery",
    "ReferencesQuery",
    "resolve",
    "decode",
]
