"""Class and method definition lookup."""

from typing import Union

from ..models import (
    ClassData,
    LookupResult,
    LookupStatus,
    MethodData,
    Navigation,
    ResultEntry,
)
from ..graph import SymbolIndex
from .base import Query


class LookupQuery(Query[LookupResult]):
    """Resolve a typed symbol to class and method definitions.

    A query starting with an upper-case letter is looked up as a class,
    anything else as a method name. Only that one exact search runs; when
    it finds nothing, classes and methods containing the query are listed
    instead and the result is marked partial.
    """

    def execute(self, query: str) -> LookupResult:
        """Execute the lookup.

        Args:
            query: Class name, method name, or a fragment of either.

        Returns:
            LookupResult with entries in display order.
        """
        if not query:
            return LookupResult(query=query, status=LookupStatus.EMPTY)

        if not self.index.is_ready():
            return LookupResult(query=query, status=LookupStatus.INDEX_NOT_READY)

        if query[0].isupper():
            entries = self._class_entries(query)
        else:
            entries = self._method_entries(query)
        if entries:
            return LookupResult(
                query=query, status=LookupStatus.FOUND, entries=tuple(entries)
            )

        entries = self._partial_entries(query)
        if not entries:
            return LookupResult(query=query, status=LookupStatus.EMPTY)
        return LookupResult(
            query=query,
            status=LookupStatus.FOUND,
            entries=tuple(entries),
            was_partial=True,
        )

    def select(
        self, result: LookupResult, entry: ResultEntry
    ) -> Union[Navigation, LookupResult]:
        """Act on a chosen entry.

        A class picked from a partial result is looked up again by its exact
        name. Everything else navigates straight to the definition.
        """
        if result.was_partial and entry.is_class:
            return self.execute(entry.display_name)
        return Navigation(path=entry.target_path, position=entry.target_offset)

    def _class_entries(self, class_name: str) -> list[ResultEntry]:
        """Class, its class methods and instance methods, then each ancestor."""
        klass = self.index.find_class(class_name)
        if klass is None:
            return []

        entries = []
        for current in klass.chain():
            entries.append(self._class_entry(current))
            if current.meta_class is not None:
                entries.extend(self._method_entry(m) for m in current.meta_class.methods)
            entries.extend(self._method_entry(m) for m in current.methods)
        return entries

    def _method_entries(self, method_name: str) -> list[ResultEntry]:
        entries = [self._method_entry(m) for m in self.index.methods_by_name(method_name)]
        return sorted(entries, key=lambda e: e.display_name)

    def _partial_entries(self, fragment: str) -> list[ResultEntry]:
        entries = [self._method_entry(m) for m in self.index.find_method_partial(fragment)]
        entries.extend(self._class_entry(k) for k in self.index.find_class_partial(fragment))
        return sorted(entries, key=lambda e: e.display_name)

    def _class_entry(self, klass: ClassData) -> ResultEntry:
        return ResultEntry(
            display_name=klass.name,
            display_path=self.index.compact_path(klass.definition.path),
            target_path=klass.definition.path,
            target_offset=klass.definition.position,
            is_class=True,
            signature=klass.name,
        )

    def _method_entry(self, method: MethodData) -> ResultEntry:
        return ResultEntry(
            display_name=method.signature(),
            display_path=self.index.compact_path(method.definition.path),
            target_path=method.definition.path,
            target_offset=method.definition.position,
            is_class=False,
            signature=method.signature(with_arguments=True),
        )


def resolve(query: str, index: SymbolIndex) -> LookupResult:
    """Resolve a query against an index. See LookupQuery."""
    return LookupQuery(index).execute(query)
