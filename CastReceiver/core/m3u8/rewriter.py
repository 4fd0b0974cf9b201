# 12.10.26

import logging
from typing import Dict, List, Tuple


# Internal utilities
from CastReceiver.utils.exceptions import ParseSkip
from CastReceiver.core.codec.side_channel import make_token


# Logic
from .attributes import AttributeSet, AttributeValue, is_media_line, parse_media_line, build_media_line
from .language import AllocationState, allocate_language


# Variable
logger = logging.getLogger(__name__)
REWRITE_TYPES = ("AUDIO", "SUBTITLES")
CARRIED_KEYS = ("LANGUAGE", "NAME", "FORCED", "CHANNELS")
CARRIER_KEY = "CHARACTERISTICS"


class ManifestRewriter:
    """
    Rewrites the #EXT-X-MEDIA lines of a master playlist so a player that only
    understands LANGUAGE and CHARACTERISTICS still gets the full track data:
    duplicated languages become unique and the original values ride along
    as an encoded token inside CHARACTERISTICS.

    Instances hold no state between calls and can be shared.
    """

    def rewrite(self, m3u8: str) -> str:
        return self.rewrite_with_count(m3u8)[0]

    def rewrite_with_count(self, m3u8: str) -> Tuple[str, int]:
        """Return the rewritten manifest and the number of lines changed."""
        state = AllocationState()
        updated = 0

        lines = m3u8.split("\n")
        for idx, line in enumerate(lines):
            if not is_media_line(line):
                continue

            # Keep CRLF documents byte-identical outside the rewritten lines.
            ending = "\r" if line.endswith("\r") else ""
            body = line[:-1] if ending else line

            try:
                lines[idx] = self._rewrite_line(body, state) + ending
            except ParseSkip as e:
                logger.debug(f"Skip line {idx}: {e}")
                continue
            except (TypeError, ValueError) as e:
                logger.warning(f"Leaving line {idx} unchanged: {e}")
                continue

            updated += 1

        if updated:
            logger.info(f"ManifestRewriter: updated {updated} lines in m3u8")
        return "\n".join(lines), updated

    def _rewrite_line(self, line: str, state: AllocationState) -> str:
        attrs = parse_media_line(line)

        media_type = attrs.get("TYPE")
        if media_type is None or media_type.value not in REWRITE_TYPES:
            raise ParseSkip(f"TYPE={media_type.value if media_type else None} is not rewritten")

        obj = collect_side_channel(attrs)
        carrier = attrs[CARRIER_KEY].value if CARRIER_KEY in attrs else ""
        roles = carrier.split(",") if carrier else []
        roles.append(make_token(obj))
        attrs[CARRIER_KEY] = AttributeValue(",".join(roles), True)

        group_id = attrs["GROUP-ID"].value if "GROUP-ID" in attrs else None
        language = attrs["LANGUAGE"].value if "LANGUAGE" in attrs else None
        attrs["LANGUAGE"] = AttributeValue(allocate_language(state, group_id, language), True)

        return build_media_line(attrs)


def collect_side_channel(attrs: AttributeSet) -> Dict[str, str]:
    return {key: attrs[key].value for key in CARRIED_KEYS if key in attrs}


def rewrite_manifest(m3u8: str) -> str:
    return ManifestRewriter().rewrite(m3u8)


def rewritten_lines(original: str, rewritten: str) -> List[int]:
    """Indexes of the lines that differ between two versions of one manifest."""
    return [
        idx for idx, (before, after) in enumerate(zip(original.split("\n"), rewritten.split("\n")))
        if before != after
    ]
