# 12.10.26

from .attributes import AttributeValue, parse_attributes, serialize_attributes, parse_media_line, build_media_line
from .language import AllocationState, allocate_language
from .rewriter import ManifestRewriter, rewrite_manifest

__all__ = [
    "AttributeValue",
    "parse_attributes",
    "serialize_attributes",
    "parse_media_line",
    "build_media_line",
    "AllocationState",
    "allocate_language",
    "ManifestRewriter",
    "rewrite_manifest"
]
