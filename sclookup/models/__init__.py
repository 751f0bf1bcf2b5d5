"""Data models for sclookup."""

from .symbol import META_PREFIX, Location, MethodData, ClassData, full_method_name
from .results import (
    LookupStatus,
    ReferencesStatus,
    ResultEntry,
    ReferenceEntry,
    Navigation,
    LookupResult,
    ReferencesResult,
)

__all__ = [
    "META_PREFIX",
    "Location",
    "MethodData",
    "ClassData",
    "full_method_name",
    "LookupStatus",
    "ReferencesStatus",
    "ResultEntry",
    "ReferenceEntry",
    "Navigation",
    "LookupResult",
    "ReferencesResult",
]
