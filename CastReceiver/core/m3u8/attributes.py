# 12.10.26

import re
import logging
from typing import Dict, NamedTuple


# Internal utilities
from CastReceiver.utils.exceptions import ParseSkip


# Variable
logger = logging.getLogger(__name__)
MEDIA_PREFIX = "#EXT-X-MEDIA:"
QUOTED_PAIR = re.compile(r'^([A-Za-z0-9_-]+)="([^"]*)"\s*,?(.*)$', re.DOTALL)
BARE_PAIR = re.compile(r'^([A-Za-z0-9_-]+)=([^,]*)\s*,?(.*)$', re.DOTALL)


class AttributeValue(NamedTuple):
    value: str
    quoted: bool


AttributeSet = Dict[str, AttributeValue]


def parse_attributes(body: str) -> AttributeSet:
    """
    Split an attribute list (KEY=VALUE,KEY="VALUE",...) into an ordered mapping.

    Quoted values are tried first, bare values second. Parsing stops at the first
    remainder matching neither form and that tail is dropped. A repeated key keeps
    the position of its first occurrence and the value of its last.
    """
    attrs: AttributeSet = {}
    remaining = body

    while remaining:
        quoted = True
        match = QUOTED_PAIR.match(remaining)
        if not match:
            quoted = False
            match = BARE_PAIR.match(remaining)
        if not match:
            logger.debug(f"Dropping unparsable attribute tail: {remaining!r}")
            break

        attrs[match.group(1)] = AttributeValue(match.group(2), quoted)
        remaining = match.group(3)

    return attrs


def serialize_attributes(attrs: AttributeSet) -> str:
    parts = []
    for key, attr in attrs.items():
        if attr.quoted:
            parts.append(f'{key}="{attr.value}"')
        else:
            parts.append(f"{key}={attr.value}")
    return ",".join(parts)


def is_media_line(line: str) -> bool:
    return line.startswith(MEDIA_PREFIX)


def parse_media_line(line: str) -> AttributeSet:
    if not is_media_line(line):
        raise ParseSkip(f"Not a rendition line: {line[:40]!r}")
    return parse_attributes(line[len(MEDIA_PREFIX):])


def build_media_line(attrs: AttributeSet) -> str:
    return MEDIA_PREFIX + serialize_attributes(attrs)
