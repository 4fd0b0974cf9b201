# 12.10.26

import re
import logging
from typing import Any, Callable, Dict, List, Optional


# Internal utilities
from CastReceiver.utils import config_manager
from CastReceiver.core.m3u8.rewriter import ManifestRewriter
from CastReceiver.core.tracks.annotator import TrackDescriptor, apply_track_annotation


# Variable
logger = logging.getLogger(__name__)
MANIFEST_REQUEST = "MANIFEST"
HLS_CONTENT = re.compile(r"\.m3u8(\?.*)?$")


def _get(obj: Any, name: str, default: Any = None) -> Any:
    if isinstance(obj, dict):
        return obj.get(name, default)
    return getattr(obj, name, default)


def _set(obj: Any, name: str, value: Any) -> None:
    if isinstance(obj, dict):
        obj[name] = value
    else:
        setattr(obj, name, value)


def is_rewritable_response(request_type: str, response: Any) -> bool:
    if request_type != MANIFEST_REQUEST:
        return False

    uri = _get(response, "uri") or ""
    suffixes = tuple(config_manager.config.get_list("MANIFEST", "manifest_suffixes"))
    if not uri.endswith(suffixes):
        return False

    status = _get(response, "status")
    if status and int(status) // 100 != 2:
        return False
    return True


def manifest_response_filter(request_type: str, response: Any) -> None:
    """Rewrite master playlists in place on their way to the player."""
    if not config_manager.config.get_bool("MANIFEST", "rewrite_manifest"):
        return

    try:
        if not is_rewritable_response(request_type, response):
            return

        data = _get(response, "data")
        text = data.decode("utf-8") if isinstance(data, (bytes, bytearray)) else str(data)
        _set(response, "data", ManifestRewriter().rewrite(text).encode("utf-8"))

    except Exception as e:
        logger.error(f"error while rewriting manifest: {e}")


def update_tracks(message: Dict[str, Any]) -> Dict[str, Any]:
    for idx, track in enumerate(message["media"]["tracks"]):
        try:
            if isinstance(track, TrackDescriptor):
                apply_track_annotation(track)
            else:
                apply_track_annotation(TrackDescriptor.from_dict(track)).write_to(track)
        except Exception as e:
            logger.error(f"Track update failed for track {idx}: {e}")
    return message


def media_status_interceptor(message: Dict[str, Any]) -> Dict[str, Any]:
    """MEDIA_STATUS hook: put back the track data hidden in roles."""
    media = message.get("media") if isinstance(message, dict) else None
    if not media or not isinstance(media.get("tracks"), list):
        return message
    if not config_manager.config.get_bool("TRACKS", "apply_annotations"):
        return message

    return update_tracks(message)


def load_request_interceptor(request: Dict[str, Any]) -> Dict[str, Any]:
    """LOAD hook: announce HLS as DASH so the host picks its DASH capable player."""
    media = request.get("media") if isinstance(request, dict) else None
    if not media or not config_manager.config.get_bool("LOAD", "force_dash_content_type"):
        return request

    content_id = media.get("contentId") or ""
    content_url = media.get("contentUrl") or ""
    if HLS_CONTENT.search(content_id) or HLS_CONTENT.search(content_url):
        media["contentType"] = config_manager.config.get("LOAD", "dash_content_type")
    return request


class ReceiverHooks:
    """Named callback registrations the host framework invokes."""

    def __init__(self):
        self._callbacks: Dict[str, List[Callable[..., Any]]] = {}

    def register(self, name: str, callback: Callable[..., Any]) -> None:
        self._callbacks.setdefault(name, []).append(callback)

    def callbacks(self, name: str) -> List[Callable[..., Any]]:
        return list(self._callbacks.get(name, []))

    def dispatch(self, name: str, *args: Any) -> Optional[Any]:
        """Run every callback registered under name; interceptors pass their result along."""
        result = args[-1] if args else None
        for callback in self.callbacks(name):
            returned = callback(*args)
            if returned is not None:
                result = returned
                args = args[:-1] + (returned,)
        return result


def default_hooks() -> ReceiverHooks:
    hooks = ReceiverHooks()
    hooks.register("manifest_response", manifest_response_filter)
    hooks.register("media_status", media_status_interceptor)
    hooks.register("load", load_request_interceptor)
    return hooks
