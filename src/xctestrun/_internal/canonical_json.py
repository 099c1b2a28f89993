"""Centralized canonical JSON serialization.

Used for everything the CLI prints or writes, so that the same xctestrun file
always produces byte-identical output.
"""

import json
from typing import Any


def canonical_dumps(obj: Any) -> str:
    """
    Canonical JSON serialization.

    Rules:
    - UTF-8 encoding
    - Sorted keys
    - Stable separators (",", ":")
    - List order is kept as given (tests to run, args, ...)
    - No trailing whitespace

    Args:
        obj: Python object to serialize

    Returns:
        Canonical JSON string (UTF-8 encoded)
    """
    return json.dumps(
        obj,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False  # UTF-8 encoding
    )
