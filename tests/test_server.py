"""Tests for the create_upload_policy tool."""

import pytest
from fastmcp.exceptions import ToolError

from s3_post_policy import server
from s3_post_policy.encoding import decode_policy


@pytest.fixture
def configured(monkeypatch):
    """Point the server at a fake bucket with test credentials."""
    monkeypatch.setattr(server.Config, "UPLOAD_BUCKET", "uploads")
    monkeypatch.setattr(server.Config, "AWS_REGION", "us-west-2")
    monkeypatch.setattr(server.Config, "AWS_ACCESS_KEY_ID", "AKIDEXAMPLE")
    monkeypatch.setattr(server.Config, "AWS_SECRET_ACCESS_KEY", "SECRET")
    monkeypatch.setattr(server.Config, "DEFAULT_ACL", "private")
    monkeypatch.setattr(server.Config, "DEFAULT_EXPIRATION_SEC", 120)
    monkeypatch.setattr(server.Config, "DEFAULT_SUCCESS_ACTION_STATUS", "201")


def test_bucket_url():
    assert server.bucket_url("uploads", "us-west-2") == "https://uploads.s3.us-west-2.amazonaws.com/"


def test_create_upload_policy_uses_config(configured):
    result = server.create_upload_policy(
        key="avatars/1.png",
        content_type="image/png",
        conditions=[{"Content-Type": "image/png"}],
    )

    assert result["url"] == "https://uploads.s3.us-west-2.amazonaws.com/"
    fields = result["fields"]
    assert fields["key"] == "avatars/1.png"
    assert fields["acl"] == "private"
    assert fields["Content-Type"] == "image/png"
    assert fields["X-Amz-Credential"].startswith("AKIDEXAMPLE/")
    assert fields["X-Amz-Credential"].endswith("/us-west-2/s3/aws4_request")

    conditions = decode_policy(fields["Policy"])["conditions"]
    assert conditions[0] == {"bucket": "uploads"}
    assert conditions[-1] == {"Content-Type": "image/png"}


def test_create_upload_policy_overrides(configured):
    result = server.create_upload_policy(
        key="k",
        acl="public-read",
        success_action_status="200",
    )

    assert result["fields"]["acl"] == "public-read"
    assert result["fields"]["success_action_status"] == "200"


def test_create_upload_policy_missing_bucket_is_tool_error(configured, monkeypatch):
    monkeypatch.setattr(server.Config, "UPLOAD_BUCKET", "")

    with pytest.raises(ToolError, match="bucket"):
        server.create_upload_policy(key="k")


def test_create_upload_policy_bad_ttl_is_tool_error(configured):
    with pytest.raises(ToolError, match="expiration_sec"):
        server.create_upload_policy(key="k", expiration_sec=0)
