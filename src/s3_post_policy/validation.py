"""
Option validation for POST policy generation.

Validation runs before any date or cryptographic work and collects every
violation instead of stopping at the first one. The result is a tagged
value; callers decide whether to raise.
"""

import math
import re
from dataclasses import dataclass, field
from datetime import timedelta
from numbers import Number, Real
from typing import Any, Mapping, Sequence

from .errors import InvalidOption, InvalidOptions
from .models import PolicyOptions

REQUIRED_STRING_OPTIONS = ("bucket", "key", "region", "access_key", "secret_key")
SUCCESS_ACTION_STATUS_PATTERN = re.compile(r"[0-9]{3}")
MAX_EXPIRATION_SEC = timedelta.max.total_seconds()


@dataclass
class ValidationResult:
    """Outcome of validate_options(): ok, or the list of violations."""

    errors: list[InvalidOption] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def fields(self) -> list[str]:
        return [e.field for e in self.errors]

    def raise_for_errors(self) -> None:
        """
        Raise if validation failed.

        Raises:
            InvalidOption: Single violation
            InvalidOptions: Several violations (subclass of InvalidOption)
        """
        if not self.errors:
            return
        if len(self.errors) == 1:
            raise self.errors[0]
        raise InvalidOptions(self.errors)


def _is_scalar(value: Any) -> bool:
    return value is None or isinstance(value, (str, Number))


def _check_clause(index: int, clause: Any) -> InvalidOption | None:
    if isinstance(clause, Mapping):
        if not clause:
            return InvalidOption(f"conditions[{index}]", "mapping clause must not be empty")
        values = list(clause.values())
    elif isinstance(clause, (list, tuple)):
        if not clause:
            return InvalidOption(f"conditions[{index}]", "rule clause must not be empty")
        values = list(clause)
    else:
        return InvalidOption(
            f"conditions[{index}]",
            f"must be a mapping or a list, got {type(clause).__name__}",
        )
    for value in values:
        if not _is_scalar(value):
            return InvalidOption(
                f"conditions[{index}]",
                f"values must be strings, numbers or booleans, got {type(value).__name__}",
            )
    return None


def validate_options(options: PolicyOptions) -> ValidationResult:
    """
    Check every option and report all violations.

    Checks:
    - bucket, key, region, access_key, secret_key are non-empty strings
    - acl is a string
    - conditions is an ordered sequence of mapping/list clauses
    - expiration_sec is a positive number no larger than timedelta.max
    - clause values are scalars (str, number, bool, None)
    - success_action_status is a 3-digit numeric string
    - content_type, if given, is a string

    Args:
        options: Options to check

    Returns:
        ValidationResult (ok when errors is empty)
    """
    result = ValidationResult()
    errors = result.errors

    if not isinstance(options, PolicyOptions):
        errors.append(
            InvalidOption("options", f"expected PolicyOptions, got {type(options).__name__}")
        )
        return result

    for name in REQUIRED_STRING_OPTIONS:
        value = getattr(options, name)
        if value is None:
            errors.append(InvalidOption(name, "is required"))
        elif not isinstance(value, str):
            errors.append(InvalidOption(name, f"must be a string, got {type(value).__name__}"))
        elif not value.strip():
            errors.append(InvalidOption(name, "must not be empty"))

    if not isinstance(options.acl, str):
        errors.append(InvalidOption("acl", f"must be a string, got {type(options.acl).__name__}"))

    conditions = options.conditions
    if not isinstance(conditions, Sequence) or isinstance(conditions, (str, bytes)):
        errors.append(
            InvalidOption(
                "conditions",
                f"must be an ordered list of clauses, got {type(conditions).__name__}",
            )
        )
    else:
        for index, clause in enumerate(conditions):
            error = _check_clause(index, clause)
            if error is not None:
                errors.append(error)

    ttl = options.expiration_sec
    if isinstance(ttl, bool) or not isinstance(ttl, Real):
        errors.append(
            InvalidOption("expiration_sec", f"must be a number, got {type(ttl).__name__}")
        )
    else:
        try:
            seconds = float(ttl)
        except OverflowError:
            seconds = math.inf
        if math.isnan(seconds) or seconds <= 0:
            errors.append(InvalidOption("expiration_sec", f"must be > 0, got {ttl}"))
        elif seconds > MAX_EXPIRATION_SEC:
            errors.append(
                InvalidOption("expiration_sec", f"must be <= {MAX_EXPIRATION_SEC:.0f}, got {ttl}")
            )

    status = options.success_action_status
    if not isinstance(status, str) or not SUCCESS_ACTION_STATUS_PATTERN.fullmatch(status):
        errors.append(
            InvalidOption(
                "success_action_status",
                f"must be a 3-digit numeric string, got {status!r}",
            )
        )

    if options.content_type is not None and not isinstance(options.content_type, str):
        errors.append(
            InvalidOption(
                "content_type",
                f"must be a string, got {type(options.content_type).__name__}",
            )
        )

    return result
