"""Graph module for loading and indexing introspection snapshots."""

from .index import IntrospectionIndex
from .loader import SnapshotSpec, decode_snapshot, load_snapshot
from .protocol import SymbolIndex

__all__ = [
    "IntrospectionIndex",
    "SnapshotSpec",
    "decode_snapshot",
    "load_snapshot",
    "SymbolIndex",
]
