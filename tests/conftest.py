"""Pytest fixtures and test utilities for the POST policy test suite."""

import hashlib
import hmac
from datetime import datetime, timezone

import pytest

from s3_post_policy.clock import FrozenClock
from s3_post_policy.models import PolicyOptions

FROZEN_INSTANT = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


# ============================================================================
# CLOCK FIXTURES
# ============================================================================


@pytest.fixture
def frozen_clock():
    """Clock pinned at 2024-01-02T03:04:05Z."""
    return FrozenClock(FROZEN_INSTANT)


# ============================================================================
# OPTION FIXTURES
# ============================================================================


@pytest.fixture
def base_options():
    """Minimal valid options (the worked example)."""
    return PolicyOptions(
        bucket="b",
        key="k",
        region="us-east-1",
        access_key="AK",
        secret_key="SK",
        expiration_sec=300,
    )


# ============================================================================
# INDEPENDENT SIGNATURE RECOMPUTATION
# ============================================================================


def recompute_signature(secret_key: str, yymmdd: str, region: str, policy_b64: str) -> str:
    """SigV4 POST signature computed without the package under test."""

    def _sign(key: bytes, msg: str) -> bytes:
        return hmac.new(key, msg.encode("utf-8"), hashlib.sha256).digest()

    key = _sign(("AWS4" + secret_key).encode("utf-8"), yymmdd)
    key = _sign(key, region)
    key = _sign(key, "s3")
    key = _sign(key, "aws4_request")
    return hmac.new(key, policy_b64.encode("utf-8"), hashlib.sha256).hexdigest()
