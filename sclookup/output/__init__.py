"""Output formatting module."""

from .json_formatter import print_json
from .console import print_lookup, print_references, print_navigation
from .convert import lookup_to_dict, references_to_dict

__all__ = [
    "print_json",
    "print_lookup",
    "print_references",
    "print_navigation",
    "lookup_to_dict",
    "references_to_dict",
]
