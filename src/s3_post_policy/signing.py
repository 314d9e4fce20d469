"""AWS Signature Version 4 key derivation and policy signing."""

import hashlib
import hmac

AWS_ALGORITHM = "AWS4-HMAC-SHA256"
AWS_SERVICE_NAME = "s3"
AWS_REQUEST_TERMINATOR = "aws4_request"


def _hmac_sha256(key: bytes, message: str) -> bytes:
    return hmac.new(key, message.encode("utf-8"), hashlib.sha256).digest()


def credential_scope(
    access_key: str,
    yymmdd: str,
    region: str,
    service: str = AWS_SERVICE_NAME,
    terminator: str = AWS_REQUEST_TERMINATOR,
) -> str:
    """
    Build the X-Amz-Credential value.

    Example: AKIDEXAMPLE/20240102/us-east-1/s3/aws4_request
    """
    return f"{access_key}/{yymmdd}/{region}/{service}/{terminator}"


def derive_signing_key(
    secret_key: str,
    yymmdd: str,
    region: str,
    service: str = AWS_SERVICE_NAME,
    terminator: str = AWS_REQUEST_TERMINATOR,
) -> bytes:
    """
    Scope a long-term secret to a date/region/service signing key.

    Chain:
        k_date    = HMAC("AWS4" + secret, yymmdd)
        k_region  = HMAC(k_date, region)
        k_service = HMAC(k_region, service)
        k_signing = HMAC(k_service, terminator)

    Every stage keys on the raw digest of the previous one, never a hex or
    base64 rendering of it.

    Args:
        secret_key: AWS secret access key
        yymmdd: UTC date stamp (YYYYMMDD)
        region: AWS region, e.g. "us-east-1"
        service: Service name (default "s3")
        terminator: Scope terminator (default "aws4_request")

    Returns:
        32-byte signing key. Do not log or persist it.
    """
    k_date = _hmac_sha256(f"AWS4{secret_key}".encode("utf-8"), yymmdd)
    k_region = _hmac_sha256(k_date, region)
    k_service = _hmac_sha256(k_region, service)
    return _hmac_sha256(k_service, terminator)


def sign_policy(encoded_policy: str, signing_key: bytes) -> str:
    """Return the lowercase hex HMAC-SHA256 of the base64 policy."""
    return hmac.new(
        signing_key,
        encoded_policy.encode("utf-8"),
        hashlib.sha256,
    ).hexdigest()
