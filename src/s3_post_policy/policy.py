"""Policy document construction."""

from typing import Any, Mapping

from loguru import logger

from .clock import Clock
from .models import ConditionClause, DateParts, PolicyDocument, PolicyOptions
from .signing import AWS_ALGORITHM, credential_scope


def _stringify(value: Any) -> str:
    """Coerce a condition value to the string form the service compares."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    return str(value)


def normalize_condition(clause: Any) -> ConditionClause:
    """
    Coerce a caller-supplied clause into its signed form.

    - {"field": value}           -> {"field": "value"}
    - {"a": x, "b": y, ...}      -> ["x", "y", ...] (values, in order)
    - ["starts-with", "$key", p] -> ["starts-with", "$key", "p"]

    Rule semantics (starts-with, content-length-range, ...) are not checked.
    """
    if isinstance(clause, Mapping):
        if len(clause) == 1:
            ((name, value),) = clause.items()
            return {str(name): _stringify(value)}
        return [_stringify(v) for v in clause.values()]
    return [_stringify(v) for v in clause]


def constrains_content_type(clause: ConditionClause) -> bool:
    """True if a normalized clause places a condition on Content-Type."""
    if isinstance(clause, dict):
        return any(name.lower() == "content-type" for name in clause)
    return any(v.lower() == "$content-type" for v in clause)


def build_policy(options: PolicyOptions, date_parts: DateParts, clock: Clock) -> PolicyDocument:
    """
    Assemble the policy document for validated options.

    Condition order is fixed: bucket, key, acl, success_action_status,
    x-amz-credential, x-amz-algorithm, x-amz-date, then caller conditions as
    given.

    Args:
        options: Validated options
        date_parts: Date stamps for this call
        clock: Clock used for the expiration instant

    Returns:
        PolicyDocument
    """
    credential = credential_scope(options.access_key, date_parts.yymmdd, options.region)
    expiration = clock.get_expiration(options.expiration_sec)

    conditions: list[ConditionClause] = [
        {"bucket": options.bucket},
        {"key": options.key},
        {"acl": options.acl},
        {"success_action_status": options.success_action_status},
        {"x-amz-credential": credential},
        {"x-amz-algorithm": AWS_ALGORITHM},
        {"x-amz-date": date_parts.amz_date},
    ]
    custom = [normalize_condition(c) for c in options.conditions]
    conditions.extend(custom)

    if options.content_type is not None and not any(constrains_content_type(c) for c in custom):
        logger.warning(
            f"content_type={options.content_type!r} is set but no condition covers "
            "Content-Type; the storage service will reject the upload form"
        )

    return PolicyDocument(expiration=expiration, conditions=tuple(conditions))
