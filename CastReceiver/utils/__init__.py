# 12.10.26

from .config_json import config_manager
from .logger import Logger
from .exceptions import CastReceiverError, ParseSkip, DecodeError, AllocationOverflow

__all__ = [
    "config_manager",
    "Logger",
    "CastReceiverError",
    "ParseSkip",
    "DecodeError",
    "AllocationOverflow"
]
