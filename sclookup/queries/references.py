"""Decoding of symbol references responses.

The references search runs in the language process, which answers with a
YAML document shaped as::

    [symbol, [[class_name, method_name, path, offset], ...]]

The whole document is validated before any entry is built, so a single bad
record rejects the response.
"""

import msgspec
import yaml

from ..models import (
    ReferenceEntry,
    ReferencesResult,
    ReferencesStatus,
    full_method_name,
)
from ..graph import SymbolIndex
from .base import Query


class ReferenceRecord(msgspec.Struct, array_like=True):
    """One reference: [class_name, method_name, path, offset].

    Trailing elements after the offset are ignored.
    """

    class_name: str
    method_name: str
    path: str
    offset: int


class ReferencesPayload(msgspec.Struct, array_like=True, forbid_unknown_fields=True):
    """Top-level response: exactly [symbol, records]."""

    symbol: str
    references: list[ReferenceRecord]


class ReferencesQuery(Query[ReferencesResult]):
    """Turn a raw references response into navigable entries."""

    def execute(self, payload: bytes | str) -> ReferencesResult:
        """Decode a complete response payload.

        Args:
            payload: YAML document produced by the references search.

        Returns:
            ReferencesResult with entries in payload order.
        """
        # Display paths need introspection data
        if not self.index.is_ready():
            return ReferencesResult(status=ReferencesStatus.INDEX_NOT_READY)

        # Every scalar stays a string (True, off, ~ are names here); only the
        # offset is converted to an integer.
        try:
            document = yaml.load(payload, Loader=yaml.BaseLoader)
            decoded = msgspec.convert(document, ReferencesPayload, strict=False)
        except (yaml.YAMLError, msgspec.ValidationError) as e:
            return ReferencesResult(status=ReferencesStatus.MALFORMED, error=str(e))

        entries = tuple(
            ReferenceEntry(
                class_name=ref.class_name,
                method_name=ref.method_name,
                path=ref.path,
                offset=ref.offset,
                display_path=self.index.compact_path(ref.path),
                full_name=full_method_name(ref.class_name, ref.method_name),
            )
            for ref in decoded.references
        )
        return ReferencesResult(
            status=ReferencesStatus.FOUND, symbol=decoded.symbol, entries=entries
        )


def decode(payload: bytes | str, index: SymbolIndex) -> ReferencesResult:
    """Decode a references payload against an index. See ReferencesQuery."""
    return ReferencesQuery(index).execute(payload)
