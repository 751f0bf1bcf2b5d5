"""Introspection index for class and method lookups."""

import logging
import os
from collections import defaultdict
from pathlib import Path
from typing import Optional

from .loader import ClassSpec, MethodSpec, SnapshotSpec, load_snapshot
from ..models import META_PREFIX, ClassData, Location, MethodData

logger = logging.getLogger(__name__)


class IntrospectionIndex:
    """In-memory, read-only index over one introspection snapshot.

    An index built without a snapshot is not ready: introspection has not
    run yet. A rerun of introspection builds a new index instead of
    mutating this one.
    """

    def __init__(self, snapshot: Optional[SnapshotSpec] = None):
        """Initialize the index.

        Args:
            snapshot: Decoded snapshot, or None when no data is available yet.

        Raises:
            ValueError: If the snapshot has duplicate class names, a
                superclass missing from the snapshot, or an inheritance cycle.
        """
        self.snapshot = snapshot
        # Class name to class, in snapshot order
        self.classes: dict[str, ClassData] = {}
        # Method name to every method with that name, instance and class side
        self.method_map: dict[str, list[MethodData]] = defaultdict(list)
        # (root prefix ending in a separator, alias), longest root first
        self.library_roots: list[tuple[str, str]] = []

        if snapshot is not None:
            self._build_classes(snapshot)
            self._link_superclasses(snapshot)
            self._check_chains()
            self._build_method_map()
            self.library_roots = sorted(
                ((_with_sep(r.path), r.alias) for r in snapshot.library_roots),
                key=lambda root: len(root[0]),
                reverse=True,
            )
            logger.debug(
                "Indexed %d classes, %d method names",
                len(self.classes), len(self.method_map),
            )

    @classmethod
    def load(cls, path: str | Path) -> "IntrospectionIndex":
        """Build an index from a snapshot JSON file."""
        return cls(load_snapshot(path))

    def _build_classes(self, snapshot: SnapshotSpec):
        for spec in snapshot.classes:
            if spec.name in self.classes:
                raise ValueError(f"Duplicate class in snapshot: {spec.name}")
            if spec.name.startswith(META_PREFIX):
                raise ValueError(
                    f"Metaclasses are derived, not listed: {spec.name}"
                )

            definition = Location(spec.path, spec.position)
            meta_name = META_PREFIX + spec.name
            klass = ClassData(
                name=spec.name,
                definition=definition,
                methods=[_make_method(m, spec, spec.name, False) for m in spec.methods],
                meta_class=ClassData(
                    name=meta_name,
                    definition=definition,
                    methods=[_make_method(m, spec, meta_name, True) for m in spec.class_methods],
                ),
            )
            self.classes[spec.name] = klass

    def _link_superclasses(self, snapshot: SnapshotSpec):
        for spec in snapshot.classes:
            if spec.superclass is None:
                continue
            parent = self.classes.get(spec.superclass)
            if parent is None:
                raise ValueError(
                    f"Unknown superclass {spec.superclass} of {spec.name}"
                )
            self.classes[spec.name].set_superclass(parent)

    def _check_chains(self):
        """Reject cycles so every superclass walk terminates at a root."""
        acyclic: set[str] = set()
        for klass in self.classes.values():
            seen: set[str] = set()
            current: Optional[ClassData] = klass
            while current is not None and current.name not in acyclic:
                if current.name in seen:
                    raise ValueError(f"Inheritance cycle through {current.name}")
                seen.add(current.name)
                current = current.superclass
            acyclic.update(seen)

    def _build_method_map(self):
        for klass in self.classes.values():
            for method in klass.meta_class.methods:
                self.method_map[method.name].append(method)
            for method in klass.methods:
                self.method_map[method.name].append(method)

    def is_ready(self) -> bool:
        return self.snapshot is not None

    def find_class(self, name: str) -> Optional[ClassData]:
        """Exact, case-sensitive class lookup."""
        return self.classes.get(name)

    def find_class_partial(self, fragment: str) -> list[ClassData]:
        """All classes whose name contains the fragment, ordered by name."""
        return sorted(
            (k for name, k in self.classes.items() if fragment in name),
            key=lambda k: k.name,
        )

    def methods_by_name(self, name: str) -> list[MethodData]:
        return list(self.method_map.get(name, ()))

    def find_method_partial(self, fragment: str) -> list[MethodData]:
        """All methods whose name contains the fragment."""
        matches = []
        for name, methods in self.method_map.items():
            if fragment in name:
                matches.extend(methods)
        return matches

    def compact_path(self, path: str) -> str:
        """Shorten a path that lies under a library root.

        The longest matching root is replaced by its alias, or removed when
        the alias is empty. Other paths are returned unchanged.
        """
        for root, alias in self.library_roots:
            if not path.startswith(root):
                continue
            rest = path[len(root):]
            return f"{alias}{os.sep}{rest}" if alias else rest
        return path


def _with_sep(path: str) -> str:
    return path if path.endswith(os.sep) else path + os.sep


def _make_method(
    spec: MethodSpec, owner: ClassSpec, owner_name: str, is_class_side: bool
) -> MethodData:
    """Build a method, defaulting its path to the owning class's file."""
    return MethodData(
        name=spec.name,
        owner_name=owner_name,
        definition=Location(spec.path or owner.path, spec.position),
        is_class_side=is_class_side,
        arguments=tuple(spec.arguments),
    )
