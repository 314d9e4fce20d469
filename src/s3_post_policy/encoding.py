"""Canonical JSON + base64 encoding of policy documents."""

import base64
import binascii
import json
from typing import Any, Mapping, Union

from loguru import logger

from .errors import EncodingError
from .models import PolicyDocument


def encode_policy(document: Union[PolicyDocument, Mapping[str, Any]]) -> str:
    """
    Serialize a policy document and base64-encode it.

    The JSON keeps construction order (no key sorting), uses compact
    separators and leaves non-ASCII characters unescaped before UTF-8
    encoding. The service signs these exact bytes, so the output must be
    byte-identical for equal documents.

    Args:
        document: PolicyDocument or an equivalent plain mapping

    Returns:
        Standard padded base64 text

    Raises:
        EncodingError: If the document cannot be serialized
    """
    payload = document.to_dict() if isinstance(document, PolicyDocument) else document
    try:
        payload_json = json.dumps(payload, separators=(",", ":"), ensure_ascii=False)
        payload_bytes = payload_json.encode("utf-8")
    except (TypeError, ValueError) as e:
        # UnicodeEncodeError (lone surrogates) is a ValueError
        logger.error(f"Policy serialization failed: {e}")
        raise EncodingError(f"Policy document is not UTF-8 JSON-serializable: {e}") from e
    return base64.b64encode(payload_bytes).decode("ascii")


def decode_policy(encoded_policy: str) -> dict[str, Any]:
    """
    Decode a base64 policy back into its JSON document.

    WARNING: This does NOT check any signature. Use it for debugging and
    tests only.

    Raises:
        EncodingError: If the text is not base64 JSON
    """
    try:
        raw = base64.b64decode(encoded_policy, validate=True)
        return json.loads(raw.decode("utf-8"))
    except (binascii.Error, UnicodeDecodeError, ValueError) as e:
        raise EncodingError(f"Not a base64 policy document: {e}") from e
