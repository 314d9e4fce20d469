"""Centralized configuration for the upload policy server."""

import os
import warnings


class Config:
    """
    Server configuration with environment variable overrides.

    The signing pipeline never reads these values; only the tool server
    does, to fill in bucket, region and credentials.
    """

    @staticmethod
    def _parse_port(port_str: str) -> int:
        """Parse and validate port number from string."""
        try:
            port = int(port_str)
            if not (1 <= port <= 65535):
                raise ValueError(f"Port must be 1-65535, got {port}")
            return port
        except ValueError as e:
            raise ValueError(f"Invalid PORT environment variable: {e}")

    # ========================================================================
    # Server Configuration
    # ========================================================================
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = _parse_port.__func__(os.getenv("PORT", "8001"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # ========================================================================
    # Storage Credentials
    # ========================================================================
    AWS_REGION: str = os.getenv("AWS_REGION", "us-east-1")
    AWS_ACCESS_KEY_ID: str = os.getenv("AWS_ACCESS_KEY_ID", "")
    AWS_SECRET_ACCESS_KEY: str = os.getenv("AWS_SECRET_ACCESS_KEY", "")
    UPLOAD_BUCKET: str = os.getenv("UPLOAD_BUCKET", "")

    # ========================================================================
    # Policy Defaults
    # ========================================================================
    DEFAULT_ACL: str = os.getenv("DEFAULT_ACL", "public-read")
    DEFAULT_EXPIRATION_SEC: int = int(os.getenv("DEFAULT_EXPIRATION_SEC", "300"))
    DEFAULT_SUCCESS_ACTION_STATUS: str = os.getenv("DEFAULT_SUCCESS_ACTION_STATUS", "201")

    @classmethod
    def validate(cls) -> bool:
        """
        Validate configuration consistency.

        Checks:
        - Credentials and bucket are set (warning if not)
        - DEFAULT_EXPIRATION_SEC is > 0
        - DEFAULT_SUCCESS_ACTION_STATUS is a 3-digit code

        Returns:
            True if validation passes

        Raises:
            ValueError: If validation fails
        """
        errors = []

        for name in ("AWS_ACCESS_KEY_ID", "AWS_SECRET_ACCESS_KEY", "UPLOAD_BUCKET"):
            if not getattr(cls, name):
                warnings.warn(
                    f"{name} not set - create_upload_policy will fail until it is. "
                    f"Set the {name} environment variable."
                )

        if not cls.AWS_REGION:
            errors.append("AWS_REGION must not be empty")

        if cls.DEFAULT_EXPIRATION_SEC <= 0:
            errors.append(
                f"DEFAULT_EXPIRATION_SEC must be > 0, got {cls.DEFAULT_EXPIRATION_SEC}"
            )

        status = cls.DEFAULT_SUCCESS_ACTION_STATUS
        if not (len(status) == 3 and status.isascii() and status.isdigit()):
            errors.append(
                f"DEFAULT_SUCCESS_ACTION_STATUS must be a 3-digit code, got {status!r}"
            )

        if errors:
            raise ValueError(f"Config validation failed: {'; '.join(errors)}")

        return True
