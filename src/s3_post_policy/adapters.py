"""
Helpers that produce caller condition clauses.

metadata_conditions() covers callers that used to pass a fixed metadata
mapping: each pair becomes a single-key exact-match clause, in insertion
order.
"""

from typing import Any, Mapping

from .errors import InvalidOption
from .models import ConditionClause
from .policy import normalize_condition


def metadata_conditions(metadata: Mapping[str, Any]) -> list[ConditionClause]:
    """
    Translate metadata pairs into exact-match clauses.

    Example:
        {"x-amz-meta-user": 42} -> [{"x-amz-meta-user": "42"}]
    """
    if not isinstance(metadata, Mapping):
        raise InvalidOption("metadata", f"must be a mapping, got {type(metadata).__name__}")
    return [normalize_condition({name: value}) for name, value in metadata.items()]


def content_type_condition(content_type: str) -> ConditionClause:
    return {"Content-Type": content_type}


def starts_with(field: str, prefix: str) -> ConditionClause:
    """Rule clause: form field must start with prefix ("" allows anything)."""
    name = field if field.startswith("$") else f"${field}"
    return ["starts-with", name, prefix]


def content_length_range(minimum: int, maximum: int) -> ConditionClause:
    """Rule clause bounding the upload size in bytes."""
    if minimum < 0 or maximum < minimum:
        raise InvalidOption(
            "content-length-range",
            f"expected 0 <= minimum <= maximum, got {minimum}..{maximum}",
        )
    return ["content-length-range", str(minimum), str(maximum)]
