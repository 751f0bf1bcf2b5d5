"""Read interface the lookup and references queries need from an index."""

from typing import Optional, Protocol

from ..models import ClassData, MethodData


class SymbolIndex(Protocol):
    """Protocol for read-only introspection indexes."""

    def is_ready(self) -> bool:
        """Whether introspection data has been published."""
        ...

    def find_class(self, name: str) -> Optional[ClassData]:
        ...

    def find_class_partial(self, fragment: str) -> list[ClassData]:
        ...

    def methods_by_name(self, name: str) -> list[MethodData]:
        ...

    def find_method_partial(self, fragment: str) -> list[MethodData]:
        ...

    def compact_path(self, path: str) -> str:
        """Map an absolute definition path to its short display form."""
        ...
