"""Class and method data models."""

import weakref
from dataclasses import dataclass, field
from typing import Optional

META_PREFIX = "Meta_"


@dataclass(frozen=True)
class Location:
    """Definition site: absolute file path and character offset."""

    path: str
    position: int = 0


@dataclass(frozen=True)
class MethodData:
    """Method from the introspection snapshot."""

    name: str
    owner_name: str  # "Meta_Foo" for class-side methods
    definition: Location
    is_class_side: bool = False
    arguments: tuple[str, ...] = ()

    def signature(self, with_arguments: bool = False) -> str:
        """Return the display signature.

        Instance methods read "Owner: name", class-side methods read
        "Owner: *name". With arguments, the argument names are appended:
        "Owner: name (a, b)".
        """
        owner = self.owner_name
        if owner.startswith(META_PREFIX):
            sig = f"{owner[len(META_PREFIX):]}: *{self.name}"
        else:
            sig = f"{owner}: {self.name}"

        if with_arguments and self.arguments:
            sig += f" ({', '.join(self.arguments)})"
        return sig


@dataclass(eq=False)
class ClassData:
    """Class from the introspection snapshot.

    The superclass link is a weak reference. The index owns every class,
    so the link stays valid for as long as the index is alive.
    """

    name: str
    definition: Location
    methods: list[MethodData] = field(default_factory=list)
    meta_class: Optional["ClassData"] = None
    _superclass_ref: Optional[weakref.ReferenceType] = field(
        default=None, repr=False
    )

    @property
    def superclass(self) -> Optional["ClassData"]:
        if self._superclass_ref is None:
            return None
        return self._superclass_ref()

    def set_superclass(self, parent: Optional["ClassData"]):
        self._superclass_ref = weakref.ref(parent) if parent is not None else None

    def chain(self):
        """Yield this class and then each ancestor, root-most last."""
        klass: Optional[ClassData] = self
        while klass is not None:
            yield klass
            klass = klass.superclass


def full_method_name(class_name: str, method_name: str) -> str:
    """Return the "Class.method" label used for references.

    A reference without a class is shown by its bare method name, and a
    class-side owner ("Meta_Foo") is shown as "Foo.*method".
    """
    if not class_name:
        return method_name
    if class_name.startswith(META_PREFIX):
        return f"{class_name[len(META_PREFIX):]}.*{method_name}"
    return f"{class_name}.{method_name}"
