"""JSON output formatter."""

from typing import Any

import msgspec


def print_json(data: Any):
    """Print data as indented JSON to stdout.

    Dataclasses and enums are converted by msgspec, so result objects such
    as Navigation can be passed as they are.
    """
    encoded = msgspec.json.encode(msgspec.to_builtins(data))
    print(msgspec.json.format(encoded, indent=2).decode())
