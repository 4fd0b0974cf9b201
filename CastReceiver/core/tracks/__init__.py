# 12.10.26

from .annotator import TrackDescriptor, apply_track_annotation, FORCED_ROLE

__all__ = [
    "TrackDescriptor",
    "apply_track_annotation",
    "FORCED_ROLE"
]
