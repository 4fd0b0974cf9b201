# 12.10.26

from .run import main

__all__ = [
    "main",
]
