"""Data models for POST policy generation."""

from dataclasses import dataclass, field, fields
from typing import Any, Mapping, Optional, Sequence, Union

from .errors import InvalidOption

# Defaults applied when the caller leaves an option out
DEFAULT_ACL = "public-read"
DEFAULT_EXPIRATION_SEC = 300  # 5 minutes
DEFAULT_SUCCESS_ACTION_STATUS = "201"

# Exact-match {"field": "value"} or rule ["starts-with", "$key", "uploads/"]
ConditionClause = Union[dict[str, str], list[str]]

# Form field name -> value, in the order the upload form expects
ResultFields = dict[str, str]

# Accepted spellings for PolicyOptions.from_mapping()
_OPTION_ALIASES = {
    "accessKey": "access_key",
    "secretKey": "secret_key",
    "contentType": "content_type",
    "expirationSec": "expiration_sec",
    "successActionStatus": "success_action_status",
}


@dataclass(frozen=True)
class PolicyOptions:
    """
    Caller input for a single policy generation.

    Values are not checked on construction; run validate_options() (or
    generate_post_policy(), which does) before using them.

    The secret key is excluded from repr() so options can be logged safely.
    """

    bucket: str
    key: str
    region: str
    access_key: str
    secret_key: str = field(repr=False)
    acl: str = DEFAULT_ACL
    conditions: Sequence[Any] = ()
    expiration_sec: Union[int, float] = DEFAULT_EXPIRATION_SEC
    success_action_status: str = DEFAULT_SUCCESS_ACTION_STATUS
    content_type: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "PolicyOptions":
        """
        Build options from a plain mapping (JSON body, tool arguments, ...).

        Accepts snake_case names and their camelCase equivalents
        (accessKey, secretKey, contentType, expirationSec,
        successActionStatus). Required options that are absent are set to
        None so validation reports them by name.

        Raises:
            InvalidOption: If the mapping is not a mapping or names an
                unknown option
        """
        if not isinstance(data, Mapping):
            raise InvalidOption("options", f"expected a mapping, got {type(data).__name__}")

        known = {f.name for f in fields(cls)}
        values: dict[str, Any] = {}
        for raw_name, value in data.items():
            name = _OPTION_ALIASES.get(raw_name, raw_name)
            if name not in known:
                raise InvalidOption(str(raw_name), "unknown option")
            values[name] = value

        for name in ("bucket", "key", "region", "access_key", "secret_key"):
            values.setdefault(name, None)

        return cls(**values)


@dataclass(frozen=True)
class DateParts:
    """UTC date stamps derived once per call from the clock."""

    yymmdd: str  # "20240102"
    amz_date: str  # "20240102T000000Z"


@dataclass(frozen=True)
class PolicyDocument:
    """
    Policy document the storage service validates the upload against.

    Condition order and the literal key names are part of the signed
    contract. to_dict() keeps "expiration" ahead of "conditions".
    """

    expiration: str
    conditions: tuple = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "expiration": self.expiration,
            "conditions": [
                dict(c) if isinstance(c, Mapping) else list(c) for c in self.conditions
            ],
        }
