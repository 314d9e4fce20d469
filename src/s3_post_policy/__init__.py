"""S3 POST Policy - signed form fields for direct browser uploads."""

__version__ = "0.1.0"

from .adapters import content_length_range, content_type_condition, metadata_conditions, starts_with
from .clock import Clock, FrozenClock, SystemClock
from .encoding import decode_policy, encode_policy
from .errors import ClockError, EncodingError, InvalidOption, InvalidOptions, PolicyError
from .generator import generate_post_policy
from .models import DateParts, PolicyDocument, PolicyOptions
from .policy import build_policy
from .signing import credential_scope, derive_signing_key, sign_policy
from .validation import ValidationResult, validate_options

__all__ = [
    "Clock",
    "ClockError",
    "DateParts",
    "EncodingError",
    "FrozenClock",
    "InvalidOption",
    "InvalidOptions",
    "PolicyDocument",
    "PolicyError",
    "PolicyOptions",
    "SystemClock",
    "ValidationResult",
    "__version__",
    "build_policy",
    "content_length_range",
    "content_type_condition",
    "credential_scope",
    "decode_policy",
    "derive_signing_key",
    "encode_policy",
    "generate_post_policy",
    "metadata_conditions",
    "sign_policy",
    "starts_with",
    "validate_options",
]
