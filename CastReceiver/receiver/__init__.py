# 12.10.26

from .interceptors import (
    ReceiverHooks,
    default_hooks,
    manifest_response_filter,
    media_status_interceptor,
    load_request_interceptor
)

__all__ = [
    "ReceiverHooks",
    "default_hooks",
    "manifest_response_filter",
    "media_status_interceptor",
    "load_request_interceptor"
]
