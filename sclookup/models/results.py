"""Query result types."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class LookupStatus(str, Enum):
    """Outcome of a symbol lookup."""

    FOUND = "found"
    EMPTY = "empty"
    INDEX_NOT_READY = "index_not_ready"


class ReferencesStatus(str, Enum):
    """Outcome of decoding a references response."""

    FOUND = "found"
    MALFORMED = "malformed"
    INDEX_NOT_READY = "index_not_ready"


@dataclass(frozen=True)
class ResultEntry:
    """Single lookup row: a class or a method definition."""

    display_name: str
    display_path: str
    target_path: str
    target_offset: int
    is_class: bool
    # Method rows: signature with argument names; class rows: the class name
    signature: str = ""


@dataclass(frozen=True)
class ReferenceEntry:
    """Single occurrence of a symbol reported by a references search."""

    class_name: str
    method_name: str
    path: str
    offset: int
    display_path: str
    full_name: str


@dataclass(frozen=True)
class Navigation:
    """Document location the caller should open."""

    path: str
    position: int


@dataclass(frozen=True)
class LookupResult:
    """Result of symbol lookup."""

    query: str
    status: LookupStatus
    entries: tuple[ResultEntry, ...] = ()
    # Set only when the substring fallback produced the entries
    was_partial: bool = False

    @property
    def found(self) -> bool:
        return self.status is LookupStatus.FOUND


@dataclass(frozen=True)
class ReferencesResult:
    """Result of decoding a references response."""

    status: ReferencesStatus
    symbol: Optional[str] = None
    entries: tuple[ReferenceEntry, ...] = ()
    error: Optional[str] = None

    @property
    def found(self) -> bool:
        return self.status is ReferencesStatus.FOUND
