"""
Command record: property store for one command's key capture.

The record is a bag of named slots. Key vectors are stored as tuples,
counts as ints, mode tags as ModeTag.
"""

from enum import Enum
from typing import Any, Dict, Mapping, Optional, Union

from .errors import TypeMismatchError, UnknownSlotError
from .keys import EMPTY, KeyEvent, KeyVector, key_description, key_vector
from .modes import ModeTag


class Slot(str, Enum):
    """Recognized record slots."""
    NAME = "name"
    STATE_BEGIN = "evil-state-begin"
    STATE_END = "evil-state-end"
    KEYS_PRE = "keys-pre"
    KEYS_POST = "keys-post"
    KEYS_POST_RAW = "keys-post-raw"
    KEYS_MOTION_PRE = "keys-motion-pre"
    KEYS_MOTION_POST = "keys-motion-post"
    KEYS_OPERATOR_PRE = "keys-operator-pre"
    KEYS_OPERATOR_POST = "keys-operator-post"
    KEYS_COUNT = "keys-count"
    KEYS = "keys"
    LAST_INPUT = "last-input"

    @classmethod
    def coerce(cls, name: Union["Slot", str]) -> "Slot":
        """
        Resolve a slot from a Slot member or its name.

        Accepts "keys-pre" and "keys_pre" spellings.

        Raises:
            UnknownSlotError: If name is not a recognized slot
        """
        if isinstance(name, Slot):
            return name
        try:
            return cls(str(name).replace("_", "-"))
        except ValueError:
            raise UnknownSlotError(f"unknown record slot: {name!r}") from None


SlotName = Union[Slot, str]


class CommandRecord:
    """
    Mutable property store for a single command.

    Usage:
        record = CommandRecord()
        record.set(name="evil-delete", keys_pre=("d",))
        record.append(Slot.KEYS_OPERATOR_POST, ("w",))
    """

    def __init__(self, values: Optional[Mapping[SlotName, Any]] = None) -> None:
        self._values: Dict[Slot, Any] = {}
        if values:
            self.update(values)

    def __contains__(self, slot: SlotName) -> bool:
        try:
            return Slot.coerce(slot) in self._values
        except UnknownSlotError:
            return False

    def __repr__(self) -> str:
        return f"CommandRecord({self.to_dict()!r})"

    def get(self, slot: SlotName, default: Any = None) -> Any:
        """Get slot value, or default if the slot is absent."""
        return self._values.get(Slot.coerce(slot), default)

    def set(self, **slots: Any) -> None:
        """
        Overwrite one or more slots.

        Keyword names use underscores (keys_pre=...). All names are
        validated before any slot is written.
        """
        self.update(slots)

    def update(self, values: Mapping[SlotName, Any]) -> None:
        """Overwrite slots from a mapping keyed by Slot or slot name."""
        resolved = {Slot.coerce(name): value for name, value in values.items()}
        self._values.update(resolved)

    def append(self, slot: SlotName, value: Any) -> None:
        """
        Append value to a slot.

        An absent slot is set to value. A tuple slot is extended with
        tuple(value), a list slot with list(value).

        Raises:
            TypeMismatchError: If the existing value is not a tuple or list,
                or value is not a sequence
        """
        slot = Slot.coerce(slot)
        if slot not in self._values:
            self._values[slot] = value
            return

        current = self._values[slot]
        if not isinstance(current, (tuple, list)):
            raise TypeMismatchError(
                f"cannot append to {slot.value}: existing value {current!r} is not a sequence"
            )
        if not isinstance(value, (tuple, list)):
            raise TypeMismatchError(
                f"cannot append {value!r} to {slot.value}: value is not a sequence"
            )
        if isinstance(current, tuple):
            self._values[slot] = current + tuple(value)
        else:
            self._values[slot] = current + list(value)

    def vector(self, slot: SlotName) -> KeyVector:
        """
        Read a slot as a key vector. Absent slots read as empty.

        Raises:
            TypeMismatchError: If the slot holds a non-sequence value
            MalformedKeyVectorError: If the sequence holds non-key elements
        """
        slot = Slot.coerce(slot)
        value = self._values.get(slot)
        if value is None:
            return EMPTY
        if not isinstance(value, (tuple, list)):
            raise TypeMismatchError(
                f"{slot.value} holds {type(value).__name__}, expected a key vector"
            )
        return key_vector(value)

    # Read accessors over a finalized record

    def command_name(self) -> Optional[str]:
        return self.get(Slot.NAME)

    def begin_mode(self) -> Optional[ModeTag]:
        return self.get(Slot.STATE_BEGIN)

    def end_mode(self) -> Optional[ModeTag]:
        return self.get(Slot.STATE_END)

    def last_input(self) -> Optional[KeyEvent]:
        return self.get(Slot.LAST_INPUT)

    def resolved_keys(self) -> KeyVector:
        return self.vector(Slot.KEYS)

    def resolved_count(self) -> int:
        return self.get(Slot.KEYS_COUNT) or 1

    def keys_string(self) -> str:
        """Resolved keys rendered for display."""
        return key_description(self.resolved_keys())

    def to_dict(self) -> Dict[str, Any]:
        """
        JSON-friendly snapshot keyed by hyphenated slot names.

        Key vectors become lists, mode tags their string values.
        """
        out: Dict[str, Any] = {}
        for slot, value in self._values.items():
            if isinstance(value, Enum):
                value = value.value
            elif isinstance(value, tuple):
                value = list(value)
            out[slot.value] = value
        return out
