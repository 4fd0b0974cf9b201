# 12.10.26

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union


# Internal utilities
from CastReceiver.utils.exceptions import DecodeError
from CastReceiver.core.codec.side_channel import decode_object, split_token
from CastReceiver.core.m3u8.language import UNDETERMINED_LANGUAGE


# Variable
logger = logging.getLogger(__name__)
FORCED_ROLE = "forced_subtitle"


@dataclass
class TrackDescriptor:
    language: Optional[str] = None
    name: Optional[str] = None
    forced: bool = False
    channel_count: Optional[Union[int, str]] = None
    roles: Optional[List[str]] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TrackDescriptor":
        roles = data.get("roles")
        return cls(
            language=data.get("language"),
            name=data.get("name"),
            forced=bool(data.get("forced", False)),
            channel_count=data.get("channelCount"),
            roles=list(roles) if roles is not None else None
        )

    def write_to(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Copy the fields back into a wire dict, dropping the ones that became unset."""
        values = {
            "language": self.language,
            "name": self.name,
            "channelCount": self.channel_count,
            "roles": self.roles,
        }
        for key, value in values.items():
            if value is None:
                data.pop(key, None)
            else:
                data[key] = value

        if self.forced or "forced" in data:
            data["forced"] = self.forced
        return data


def apply_track_annotation(track: TrackDescriptor) -> TrackDescriptor:
    """
    Restore the data hidden in a track's roles by the manifest rewriter.

    Only the first marker role is handled and then removed. A marker that fails
    to decode leaves the track untouched.
    """
    if not track.roles:
        return track

    for idx, role in enumerate(track.roles):
        payload = split_token(role)
        if payload is None:
            continue

        try:
            obj = decode_object(payload)
        except DecodeError as e:
            logger.warning(f"Ignoring marker on track {track.name!r}: {e}")
            return track

        if obj.get("LANGUAGE"):
            track.language = obj["LANGUAGE"]
        elif track.language and track.language.startswith(UNDETERMINED_LANGUAGE):
            track.language = None

        if obj.get("NAME"):
            track.name = obj["NAME"]

        if obj.get("FORCED"):
            track.roles.append(FORCED_ROLE)
            track.forced = True

        if obj.get("CHANNELS"):
            track.channel_count = obj["CHANNELS"]

        del track.roles[idx]
        if not track.roles:
            track.roles = None
        break

    return track
