"""
Key events and key vectors.

A key event is a non-empty string naming one input key ("d", "w",
"C-a", "<escape>"). A key vector is an ordered tuple of key events.
"""

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple, Union

from .errors import MalformedKeyVectorError

KeyEvent = str
KeyVector = Tuple[KeyEvent, ...]

EMPTY: KeyVector = ()

_COUNT_START = frozenset("123456789")
_COUNT_DIGITS = frozenset("0123456789")


@dataclass(frozen=True)
class CountSplit:
    """
    Result of splitting a numeric count prefix off a key vector.

    Fields:
        count: Decimal count formed by the leading digit keys, or None
        count_present: True when a count prefix was found
        remainder: Command keys following the count
    """
    count: Optional[int]
    count_present: bool
    remainder: KeyVector


def parse_keys(text: str) -> KeyVector:
    """
    Build a key vector from text.

    Whitespace-separated tokens when the text contains whitespace
    ("C-a 3 w"), otherwise one key per character ("d2w").
    """
    if not text:
        return EMPTY
    if any(ch.isspace() for ch in text):
        return tuple(text.split())
    return tuple(text)


def key_vector(keys: Union[str, Iterable[KeyEvent], None]) -> KeyVector:
    """
    Normalize keys into a key vector.

    Raises:
        MalformedKeyVectorError: If any element is not a non-empty string
    """
    if keys is None:
        return EMPTY
    if isinstance(keys, str):
        return parse_keys(keys)
    try:
        vec = tuple(keys)
    except TypeError:
        raise MalformedKeyVectorError(f"not a key sequence: {keys!r}") from None
    for key in vec:
        if not isinstance(key, str) or not key:
            raise MalformedKeyVectorError(f"invalid key event {key!r} in {vec!r}")
    return vec


def extract_count(keys: Iterable[KeyEvent]) -> CountSplit:
    """
    Split a leading numeric count off a key vector.

    Leading digit keys form a decimal count. A leading "0" never starts a
    count (it is a command on its own), but zeros after the first digit
    are part of it.

    Example:
        extract_count(("3", "w")) -> CountSplit(3, True, ("w",))
        extract_count(("0",)) -> CountSplit(None, False, ("0",))
    """
    vec = key_vector(keys)
    n = 0
    for key in vec:
        digits = _COUNT_START if n == 0 else _COUNT_DIGITS
        if key not in digits:
            break
        n += 1
    if n == 0:
        return CountSplit(count=None, count_present=False, remainder=vec)
    return CountSplit(count=int("".join(vec[:n])), count_present=True, remainder=vec[n:])


def key_description(keys: Iterable[KeyEvent]) -> str:
    """Human readable rendering of a key vector, keys separated by spaces."""
    return " ".join(key_vector(keys))
