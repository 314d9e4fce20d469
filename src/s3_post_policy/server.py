"""FastMCP server exposing upload policy generation as a tool."""

import sys
from typing import Any, Optional

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from loguru import logger

from .config import Config
from .errors import PolicyError
from .generator import generate_post_policy
from .models import PolicyOptions

SERVER_NAME = "S3PostPolicy"

policy_server = FastMCP(SERVER_NAME)


def bucket_url(bucket: str, region: str) -> str:
    """Virtual-hosted endpoint the upload form posts to."""
    return f"https://{bucket}.s3.{region}.amazonaws.com/"


def create_upload_policy(
    key: str,
    content_type: Optional[str] = None,
    conditions: Optional[list[Any]] = None,
    acl: Optional[str] = None,
    expiration_sec: Optional[int] = None,
    success_action_status: Optional[str] = None,
) -> dict[str, Any]:
    """
    Create signed form fields for a direct browser upload.

    Bucket, region and credentials come from server configuration; the
    caller chooses the object key and any extra conditions.

    Args:
        key: Destination object key
        content_type: Content-Type form field (add a matching condition)
        conditions: Extra condition clauses, e.g. ["starts-with", "$key", "uploads/"]
        acl: Canned ACL (defaults to DEFAULT_ACL)
        expiration_sec: Policy lifetime in seconds (defaults to DEFAULT_EXPIRATION_SEC)
        success_action_status: HTTP status returned on success (defaults to "201")

    Returns:
        {"url": bucket endpoint, "fields": form fields}
    """
    options = PolicyOptions(
        bucket=Config.UPLOAD_BUCKET,
        key=key,
        region=Config.AWS_REGION,
        access_key=Config.AWS_ACCESS_KEY_ID,
        secret_key=Config.AWS_SECRET_ACCESS_KEY,
        acl=Config.DEFAULT_ACL if acl is None else acl,
        conditions=conditions or [],
        expiration_sec=Config.DEFAULT_EXPIRATION_SEC if expiration_sec is None else expiration_sec,
        success_action_status=(
            Config.DEFAULT_SUCCESS_ACTION_STATUS
            if success_action_status is None
            else success_action_status
        ),
        content_type=content_type,
    )

    try:
        fields = generate_post_policy(options)
    except PolicyError as e:
        logger.warning(f"Upload policy rejected for key={key!r}: {e}")
        raise ToolError(str(e))

    logger.info(f"Issued upload policy for s3://{options.bucket}/{key}")
    return {"url": bucket_url(options.bucket, options.region), "fields": fields}


policy_server.tool(name="create_upload_policy")(create_upload_policy)


def main():
    """
    Main entry point for the policy server.

    Configures:
    - Loguru for structured logging
    - HTTP/SSE transport
    """
    logger.remove()  # Remove default handler
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> | <level>{message}</level>",
        level=Config.LOG_LEVEL,
    )

    try:
        Config.validate()
    except ValueError as e:
        logger.error(str(e))
        sys.exit(1)

    logger.info(f"Starting {SERVER_NAME} on {Config.HOST}:{Config.PORT}...")

    try:
        policy_server.run(transport="sse", host=Config.HOST, port=Config.PORT)
    except KeyboardInterrupt:
        logger.info("Shutting down...")
    except Exception as e:
        logger.error(f"Server error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
