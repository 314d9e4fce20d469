"""End-to-end POST policy generation."""

from typing import Any, Mapping, Optional, Union

from loguru import logger

from .clock import Clock, FrozenClock, SystemClock
from .encoding import encode_policy
from .fields import assemble_fields
from .models import PolicyOptions, ResultFields
from .policy import build_policy
from .signing import derive_signing_key, sign_policy
from .validation import validate_options


def generate_post_policy(
    options: Union[PolicyOptions, Mapping[str, Any]],
    clock: Optional[Clock] = None,
) -> ResultFields:
    """
    Produce signed form fields for a browser POST upload.

    Pipeline: validate -> date -> policy document -> base64 -> signing key
    -> signature -> form fields. Validation fails before any signing work;
    there is no partial result.

    Args:
        options: PolicyOptions, or a mapping accepted by
            PolicyOptions.from_mapping()
        clock: Time source (defaults to the system clock). It is read once.

    Returns:
        Form fields: key, acl, success_action_status, Content-Type (when
        set), X-Amz-Credential, X-Amz-Algorithm, X-Amz-Date, Policy,
        X-Amz-Signature

    Raises:
        InvalidOption: If any option is invalid (InvalidOptions for several)
        ClockError: If the clock cannot be read
        EncodingError: If the policy cannot be serialized
    """
    if not isinstance(options, PolicyOptions):
        options = PolicyOptions.from_mapping(options)

    validate_options(options).raise_for_errors()

    # Pin one clock read for both the date stamp and the expiration
    pinned = FrozenClock((clock or SystemClock()).now())
    date_parts = pinned.get_date()

    document = build_policy(options, date_parts, pinned)
    encoded_policy = encode_policy(document)

    signing_key = derive_signing_key(options.secret_key, date_parts.yymmdd, options.region)
    signature = sign_policy(encoded_policy, signing_key)

    logger.debug(
        f"Signed POST policy bucket={options.bucket} key={options.key} "
        f"region={options.region} date={date_parts.yymmdd} "
        f"expiration={document.expiration} conditions={len(document.conditions)}"
    )

    return assemble_fields(encoded_policy, signature, options, date_parts)
