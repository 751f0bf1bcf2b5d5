"""Base query interface."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from ..graph import SymbolIndex

T = TypeVar("T")


class Query(ABC, Generic[T]):
    """Base query interface.

    All queries take an index and execute against it. Queries hold no
    state besides the index, so one instance can serve any number of calls.
    """

    def __init__(self, index: SymbolIndex):
        self.index = index

    @abstractmethod
    def execute(self, *args, **params) -> T:
        """Execute the query and return typed result."""
        pass
