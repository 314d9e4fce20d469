"""
Entry point for running s3_post_policy as a module.

Starts the upload policy server via:
    python -m s3_post_policy
"""

from s3_post_policy.server import main

if __name__ == "__main__":
    main()
