"""
Tests for key resolution.

Critical: The resolved keys are what every other cursor replays.
"""

import pytest

from keyrecipe.core.errors import TypeMismatchError
from keyrecipe.core.keys import parse_keys
from keyrecipe.core.record import CommandRecord, Slot
from keyrecipe.core.resolver import finalize, resolve


def make_record(**phases: str) -> CommandRecord:
    """Build a record from typed keys, e.g. make_record(keys_pre="d2w")."""
    return CommandRecord({name: parse_keys(text) for name, text in phases.items()})


def test_plain_command_uses_post_keys():
    record = make_record(keys_pre="x", keys_post="xy")

    assert resolve(record).keys == ("x", "y")


def test_plain_command_falls_back_to_pre_keys():
    record = make_record(keys_pre="x")

    assert resolve(record).keys == ("x",)


def test_empty_record_resolves_to_nothing():
    resolution = resolve(CommandRecord())

    assert resolution.keys == ()
    assert resolution.count == 1


def test_count_is_extracted():
    """3w -> count 3."""
    record = make_record(keys_pre="3w")

    assert resolve(record).count == 3


def test_motion_post_wins():
    record = make_record(keys_pre="w", keys_motion_pre="w", keys_motion_post="3w")

    assert resolve(record).keys == ("3", "w")


def test_motion_post_wins_over_operator():
    record = make_record(
        keys_pre="d",
        keys_motion_post="e",
        keys_operator_pre="d",
        keys_operator_post="w",
    )

    assert resolve(record).keys == ("e",)


def test_motion_pre_used_when_post_empty():
    record = make_record(keys_pre="w", keys_motion_pre="fw")

    assert resolve(record).keys == ("f", "w")


def test_operator_pre_equal_to_command_keys_collapses():
    """Operator key already in the prefix is not duplicated."""
    record = make_record(keys_pre="d", keys_operator_pre="d", keys_operator_post="w")

    assert resolve(record).keys == ("d", "w")


def test_operator_pre_equal_post_uses_post():
    record = make_record(keys_pre="d", keys_operator_pre="2w", keys_operator_post="2w")

    assert resolve(record).keys == ("d", "2", "w")


def test_operator_find_motion_keeps_target():
    """dtt: t motion whose target is also t; pre == post must not collapse."""
    record = make_record(keys_pre="d", keys_operator_pre="t", keys_operator_post="t")

    assert resolve(record).keys == ("d", "t", "t")


def test_operator_to_motion_keeps_target():
    record = make_record(keys_pre="c", keys_operator_pre="f", keys_operator_post="f")

    assert resolve(record).keys == ("c", "f", "f")


def test_operator_single_key_pre_concatenated():
    record = make_record(keys_pre="d", keys_operator_pre="t", keys_operator_post="x")

    assert resolve(record).keys == ("d", "t", "x")


def test_operator_long_pre_uses_post():
    record = make_record(keys_pre="d", keys_operator_pre="ab", keys_operator_post="iw")

    assert resolve(record).keys == ("d", "i", "w")


def test_operator_with_count_keeps_full_pre_keys():
    """A count prefix keeps the whole pre-command vector as prefix."""
    record = make_record(keys_pre="3d", keys_operator_pre="3d", keys_operator_post="w")
    resolution = resolve(record)

    assert resolution.keys == ("3", "d", "w")
    assert resolution.count == 3


def test_operator_count_with_pre_equal_remainder():
    record = make_record(keys_pre="2d", keys_operator_pre="d", keys_operator_post="w")

    assert resolve(record).keys == ("2", "d", "w")


def test_operator_post_only():
    record = make_record(keys_pre="d", keys_operator_post="w")

    assert resolve(record).keys == ("d", "w")


def test_finalize_writes_keys_and_count():
    record = make_record(keys_pre="4x")
    finalize(record)

    assert record.get(Slot.KEYS) == ("4", "x")
    assert record.get(Slot.KEYS_COUNT) == 4
    assert record.resolved_count() == 4


def test_finalize_default_count():
    record = make_record(keys_pre="x")
    finalize(record)

    assert record.get(Slot.KEYS_COUNT) == 1


def test_resolve_rejects_scalar_phase():
    record = make_record(keys_pre="d")
    record.set(keys_operator_pre=1)

    with pytest.raises(TypeMismatchError):
        resolve(record)


def test_resolve_is_deterministic():
    record = make_record(keys_pre="d", keys_operator_pre="t", keys_operator_post="t")

    assert len({resolve(record) for _ in range(50)}) == 1
