"""Conversion of query results to JSON-ready dicts."""

from ..models import LookupResult, ReferencesResult


def lookup_to_dict(result: LookupResult) -> dict:
    return {
        "query": result.query,
        "status": result.status.value,
        "partial": result.was_partial,
        "entries": [
            {
                "name": e.display_name,
                "signature": e.signature,
                "display_path": e.display_path,
                "path": e.target_path,
                "position": e.target_offset,
                "is_class": e.is_class,
            }
            for e in result.entries
        ],
    }


def references_to_dict(result: ReferencesResult) -> dict:
    data = {
        "symbol": result.symbol,
        "status": result.status.value,
        "references": [
            {
                "name": e.full_name,
                "class": e.class_name,
                "method": e.method_name,
                "display_path": e.display_path,
                "path": e.path,
                "position": e.offset,
            }
            for e in result.entries
        ],
    }
    if result.error:
        data["error"] = result.error
    return data
