"""Field resolver: match a rule's target pattern against record field names."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

WILDCARD = "*"


def resolve_fields(pattern: str, record: Mapping[str, Any]) -> list[str]:
    """Return the record's field names matched by ``pattern``, in record order.

    ``*`` alone matches every field. A pattern containing ``*`` is a
    case-insensitive glob anchored at both ends. Anything else is an exact,
    case-sensitive key lookup.
    """
    if pattern == WILDCARD:
        return list(record)
    if WILDCARD in pattern:
        regex = _glob_to_regex(pattern)
        return [name for name in record if regex.fullmatch(name)]
    return [pattern] if pattern in record else []


def _glob_to_regex(pattern: str) -> re.Pattern[str]:
    parts = (re.escape(part) for part in pattern.split(WILDCARD))
    return re.compile(".*".join(parts), re.IGNORECASE | re.DOTALL)
