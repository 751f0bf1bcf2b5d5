"""JSON loading utilities for introspection snapshots.

Uses msgspec typed decoding so a snapshot with the wrong shape fails at load
time instead of halfway through index construction.
"""

import logging
from pathlib import Path
from typing import Optional

import msgspec

logger = logging.getLogger(__name__)


class MethodSpec(msgspec.Struct, omit_defaults=True):
    """Method specification in snapshot JSON."""

    name: str
    position: int = 0
    path: Optional[str] = None  # Defaults to the owning class's path
    arguments: list[str] = []


class ClassSpec(msgspec.Struct, omit_defaults=True):
    """Class specification in snapshot JSON."""

    name: str
    path: str
    position: int = 0
    superclass: Optional[str] = None
    methods: list[MethodSpec] = []
    class_methods: list[MethodSpec] = []


class LibraryRootSpec(msgspec.Struct, omit_defaults=True):
    """Library directory and the short prefix it is displayed with."""

    path: str
    alias: str = ""


class SnapshotSpec(msgspec.Struct, omit_defaults=True):
    """Full snapshot JSON specification."""

    version: str = "1.0"
    library_roots: list[LibraryRootSpec] = []
    classes: list[ClassSpec] = []


# Create reusable decoder for performance
_decoder = msgspec.json.Decoder(SnapshotSpec)


def decode_snapshot(data: bytes | str) -> SnapshotSpec:
    """Decode snapshot JSON from memory.

    Raises:
        msgspec.DecodeError: If the data is not valid snapshot JSON.
    """
    return _decoder.decode(data)


def load_snapshot(path: str | Path) -> SnapshotSpec:
    """Load snapshot JSON from file.

    Args:
        path: Path to the snapshot JSON file.

    Returns:
        Parsed SnapshotSpec struct.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        msgspec.DecodeError: If the file is not valid snapshot JSON.
    """
    with open(path, "rb") as f:
        snapshot = decode_snapshot(f.read())
    logger.debug(
        "Loaded snapshot %s (version %s, %d classes)",
        path, snapshot.version, len(snapshot.classes),
    )
    return snapshot
