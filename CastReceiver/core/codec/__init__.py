# 12.10.26

from .side_channel import MARKER_PREFIX, encode_object, decode_object, make_token, split_token

__all__ = [
    "MARKER_PREFIX",
    "encode_object",
    "decode_object",
    "make_token",
    "split_token"
]
