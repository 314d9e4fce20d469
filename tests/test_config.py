"""Tests for centralized Config class."""
import importlib

import pytest

from s3_post_policy import config as config_module
from s3_post_policy.config import Config


def _reload_config(monkeypatch, **env):
    for key, value in env.items():
        monkeypatch.setenv(key, value)
    return importlib.reload(config_module).Config


def test_config_defaults(monkeypatch):
    """Verify default configuration values."""
    for key in ("HOST", "PORT", "AWS_REGION", "DEFAULT_ACL", "DEFAULT_EXPIRATION_SEC"):
        monkeypatch.delenv(key, raising=False)
    reloaded = importlib.reload(config_module).Config

    assert reloaded.HOST == "0.0.0.0"
    assert reloaded.PORT == 8001
    assert reloaded.AWS_REGION == "us-east-1"
    assert reloaded.DEFAULT_ACL == "public-read"
    assert reloaded.DEFAULT_EXPIRATION_SEC == 300


def test_config_env_overrides(monkeypatch):
    reloaded = _reload_config(
        monkeypatch,
        AWS_REGION="eu-central-1",
        UPLOAD_BUCKET="uploads",
        DEFAULT_EXPIRATION_SEC="60",
    )

    assert reloaded.AWS_REGION == "eu-central-1"
    assert reloaded.UPLOAD_BUCKET == "uploads"
    assert reloaded.DEFAULT_EXPIRATION_SEC == 60


def test_config_invalid_port(monkeypatch):
    monkeypatch.setenv("PORT", "70000")
    with pytest.raises(ValueError, match="Invalid PORT"):
        importlib.reload(config_module)
    monkeypatch.delenv("PORT")
    importlib.reload(config_module)


def test_config_validation_passes(monkeypatch):
    """Config.validate() passes with credentials set."""
    monkeypatch.setattr(Config, "AWS_ACCESS_KEY_ID", "AK")
    monkeypatch.setattr(Config, "AWS_SECRET_ACCESS_KEY", "SK")
    monkeypatch.setattr(Config, "UPLOAD_BUCKET", "b")

    assert Config.validate() is True


def test_config_validation_warns_without_credentials(monkeypatch):
    monkeypatch.setattr(Config, "AWS_ACCESS_KEY_ID", "")
    monkeypatch.setattr(Config, "AWS_SECRET_ACCESS_KEY", "")
    monkeypatch.setattr(Config, "UPLOAD_BUCKET", "b")

    with pytest.warns(UserWarning, match="AWS_ACCESS_KEY_ID"):
        Config.validate()


def test_config_validation_fails_on_zero_ttl(monkeypatch):
    """Config.validate() should fail if the default TTL is <= 0."""
    monkeypatch.setattr(Config, "DEFAULT_EXPIRATION_SEC", 0)

    with pytest.raises(ValueError, match="DEFAULT_EXPIRATION_SEC must be > 0"):
        Config.validate()


@pytest.mark.parametrize("status", ["20", "abc", "2010"])
def test_config_validation_fails_on_bad_status(monkeypatch, status):
    monkeypatch.setattr(Config, "DEFAULT_SUCCESS_ACTION_STATUS", status)

    with pytest.raises(ValueError, match="DEFAULT_SUCCESS_ACTION_STATUS"):
        Config.validate()
