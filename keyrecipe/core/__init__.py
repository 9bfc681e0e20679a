"""
Core key reconstruction primitives.

This module provides:
- Key vectors: KeyVector, parse_keys, extract_count, key_description
- ModeTag: Editing modes reported by the host
- CommandRecord: Property store for one command's captured phases
- Resolver: Pure resolution of captured phases into replayable keys
"""

from .keys import (
    CountSplit,
    KeyEvent,
    KeyVector,
    extract_count,
    key_description,
    key_vector,
    parse_keys,
)
from .modes import ModeTag
from .record import CommandRecord, Slot
from .resolver import Resolution, finalize, resolve
from .errors import KeyRecipeError, MalformedKeyVectorError, TypeMismatchError, UnknownSlotError

__all__ = [
    "CountSplit",
    "KeyEvent",
    "KeyVector",
    "extract_count",
    "key_description",
    "key_vector",
    "parse_keys",
    "ModeTag",
    "CommandRecord",
    "Slot",
    "Resolution",
    "finalize",
    "resolve",
    "KeyRecipeError",
    "MalformedKeyVectorError",
    "TypeMismatchError",
    "UnknownSlotError",
]
