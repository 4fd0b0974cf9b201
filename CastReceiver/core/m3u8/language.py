# 12.10.26

import logging
from typing import Dict, Optional, Tuple


# Internal utilities
from CastReceiver.utils.exceptions import AllocationOverflow


# Variable
logger = logging.getLogger(__name__)
DEFAULT_GROUP_ID = "gid"
UNDETERMINED_LANGUAGE = "und"
SUFFIX_FIRST_LETTER = "X"
MAX_SUFFIXES = 26


class AllocationState:
    """Occurrence counters for one manifest rewrite, keyed by (group id, language)."""

    def __init__(self):
        self.counters: Dict[Tuple[str, str], int] = {}

    def next_sequence(self, key: Tuple[str, str]) -> int:
        """Register one more occurrence of key and return how many came before it."""
        seen = self.counters.get(key, 0)
        self.counters[key] = seen + 1
        return seen

    def __len__(self):
        return len(self.counters)


def suffix_for(key: Tuple[str, str], sequence: int) -> str:
    if sequence > MAX_SUFFIXES:
        raise AllocationOverflow(key, sequence)
    return SUFFIX_FIRST_LETTER + chr(ord("A") + sequence - 1)


def allocate_language(state: AllocationState, group_id: Optional[str], language: Optional[str]) -> str:
    """
    Return a language tag unique within its (group id, language) pair.

    The first occurrence keeps its language, later ones get -XA, -XB ... -XZ.
    Past the last letter the suffix stays at XZ.

    Example:
        en -> en, en -> en-XA, en -> en-XB
    """
    group_id = group_id if group_id is not None else DEFAULT_GROUP_ID
    language = language if language is not None else UNDETERMINED_LANGUAGE
    key = (group_id, language)

    sequence = state.next_sequence(key)
    if sequence == 0:
        return language

    try:
        suffix = suffix_for(key, sequence)
    except AllocationOverflow as e:
        logger.warning(f"{e}, reusing last suffix")
        suffix = suffix_for(key, MAX_SUFFIXES)

    return f"{language}-{suffix}"
