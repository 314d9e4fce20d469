#!/usr/bin/env python3
"""
Quick start example for browser uploads.

Prints an HTML form that posts a file straight to S3 using signed fields.
Set AWS_ACCESS_KEY_ID, AWS_SECRET_ACCESS_KEY and UPLOAD_BUCKET first.
"""

import html
import os

from s3_post_policy import (
    PolicyOptions,
    content_length_range,
    content_type_condition,
    generate_post_policy,
)
from s3_post_policy.server import bucket_url


def main():
    bucket = os.environ["UPLOAD_BUCKET"]
    region = os.getenv("AWS_REGION", "us-east-1")

    options = PolicyOptions(
        bucket=bucket,
        key="uploads/example.png",
        region=region,
        access_key=os.environ["AWS_ACCESS_KEY_ID"],
        secret_key=os.environ["AWS_SECRET_ACCESS_KEY"],
        content_type="image/png",
        conditions=[
            content_type_condition("image/png"),
            content_length_range(0, 10 * 1024 * 1024),
        ],
    )
    fields = generate_post_policy(options)

    print(f'<form action="{bucket_url(bucket, region)}" method="post" enctype="multipart/form-data">')
    for name, value in fields.items():
        print(f'  <input type="hidden" name="{name}" value="{html.escape(value)}">')
    print('  <input type="file" name="file">')
    print('  <input type="submit" value="Upload">')
    print("</form>")


if __name__ == "__main__":
    main()
