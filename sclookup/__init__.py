"""sclookup - class/method definition lookup and references decoding."""

from .graph import IntrospectionIndex, SymbolIndex
from .models import (
    ClassData,
    MethodData,
    ResultEntry,
    ReferenceEntry,
    LookupResult,
    ReferencesResult,
    LookupStatus,
    ReferencesStatus,
)
from .queries import LookupQuery, ReferencesQuery, resolve, decode

__version__ = "0.1.0"

__all__ = [
    "IntrospectionIndex",
    "SymbolIndex",
    "ClassData",
    "MethodData",
    "ResultEntry",
    "ReferenceEntry",
    "LookupResult",
    "ReferencesResult",
    "LookupStatus",
    "ReferencesStatus",
    "LookupQuery",
    "ReferencesQuery",
    "resolve",
    "decode",
]
