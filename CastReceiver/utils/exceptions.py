# 12.10.26


class CastReceiverError(Exception):
    """Base class for every error raised inside CastReceiver."""


class ParseSkip(CastReceiverError):
    """A manifest line that is not a handled rendition declaration."""


class DecodeError(CastReceiverError):
    """A marker token whose payload could not be turned back into an object."""


class AllocationOverflow(CastReceiverError):
    """No more language suffixes are left for a (group, language) pair."""

    def __init__(self, key, count):
        super().__init__(f"Language suffix space exhausted for {key!r} after {count} duplicates")
        self.key = key
        self.count = count
