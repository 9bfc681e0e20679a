"""
Resolver: turns the phases captured for one command into replayable keys.

Pure over the record inputs: the same captured phases always resolve to
the same keys and count.
"""

from dataclasses import dataclass

from .keys import KeyVector, extract_count
from .record import CommandRecord, Slot

# Single-key "to/find" motions whose target key must be kept even when
# the operator phases captured the same vector twice.
PENDING_TARGET_MOTIONS = frozenset({("t",), ("f",)})


@dataclass(frozen=True)
class Resolution:
    """
    Resolved keystroke recipe.

    Fields:
        keys: Canonical key vector to replay
        count: Repeat count (1 when no count prefix was typed)
    """
    keys: KeyVector
    count: int


def _operator_suffix(
    operator_pre: KeyVector, operator_post: KeyVector, command_keys: KeyVector
) -> KeyVector:
    if operator_pre == command_keys:
        return operator_post
    if operator_pre == operator_post and operator_pre not in PENDING_TARGET_MOTIONS:
        return operator_post
    if len(operator_pre) > 1:
        return operator_post
    return operator_pre + operator_post


def resolve(record: CommandRecord) -> Resolution:
    """
    Resolve a record's captured phases.

    Precedence:
    1. Motion phase keys (post over pre)
    2. Operator phase keys, prefixed by the command keys
    3. Post-command keys, falling back to pre-command keys

    Raises:
        TypeMismatchError: If a phase slot holds a non-sequence value
        MalformedKeyVectorError: If a phase vector holds non-key elements
    """
    keys_pre = record.vector(Slot.KEYS_PRE)
    keys_post = record.vector(Slot.KEYS_POST)
    motion_pre = record.vector(Slot.KEYS_MOTION_PRE)
    motion_post = record.vector(Slot.KEYS_MOTION_POST)
    operator_pre = record.vector(Slot.KEYS_OPERATOR_PRE)
    operator_post = record.vector(Slot.KEYS_OPERATOR_POST)

    split = extract_count(keys_pre)
    count = split.count if split.count_present else 1

    if motion_pre or motion_post:
        keys = motion_post or motion_pre
    elif operator_pre or operator_post:
        prefix = keys_pre if split.count_present else split.remainder
        keys = prefix + _operator_suffix(operator_pre, operator_post, split.remainder)
    else:
        keys = keys_post or keys_pre

    return Resolution(keys=keys, count=count)


def finalize(record: CommandRecord) -> Resolution:
    """
    Resolve the record and write keys-count and keys into it.

    Raises:
        TypeMismatchError, MalformedKeyVectorError: See resolve()
    """
    resolution = resolve(record)
    record.update({Slot.KEYS_COUNT: resolution.count, Slot.KEYS: resolution.keys})
    return resolution
