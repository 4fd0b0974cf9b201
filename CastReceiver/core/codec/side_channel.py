# 12.10.26

import json
import base64
import binascii
from typing import Any, Dict, Optional


# Internal utilities
from CastReceiver.utils.exceptions import DecodeError


# Variable
MARKER_PREFIX = "xyzzy.obj."


def encode_object(obj: Dict[str, Any]) -> str:
    """Compact JSON, UTF-8 bytes, standard base64. The result has no commas or quotes."""
    text = json.dumps(obj, separators=(",", ":"), ensure_ascii=False)
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def decode_object(payload: str) -> Dict[str, Any]:
    try:
        raw = base64.b64decode(payload, validate=True)
        obj = json.loads(raw.decode("utf-8"))
    except (binascii.Error, UnicodeDecodeError, ValueError, RecursionError) as e:
        raise DecodeError(f"Invalid side channel payload {payload[:32]!r}: {e}") from e

    if not isinstance(obj, dict):
        raise DecodeError(f"Side channel payload is a {type(obj).__name__}, not an object")
    return obj


def make_token(obj: Dict[str, Any]) -> str:
    return MARKER_PREFIX + encode_object(obj)


def split_token(role: str) -> Optional[str]:
    """Return the payload of a marker token, or None for an ordinary role."""
    if not role.startswith(MARKER_PREFIX):
        return None
    return role[len(MARKER_PREFIX):]
