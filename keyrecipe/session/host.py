"""
EditorHost abstract interface.

Defines the queries the recorder needs from the host editor.
"""

import logging
from abc import ABC, abstractmethod

from ..core.keys import KeyEvent, KeyVector
from ..core.modes import ModeTag

logger = logging.getLogger(__name__)


class EditorHost(ABC):
    """
    Read-only view of the host editor's state.

    All queries describe the command currently being executed. Key vector
    queries may return any iterable of key events; the recorder normalizes
    them.
    """

    @abstractmethod
    def current_mode_tag(self) -> ModeTag:
        """Editing mode the host is in right now."""
        ...

    @abstractmethod
    def has_multiple_cursors(self) -> bool:
        ...

    @abstractmethod
    def current_command(self) -> str:
        """Name of the command being executed."""
        ...

    @abstractmethod
    def is_known_replayable_command(self, command: str) -> bool:
        ...

    @abstractmethod
    def current_raw_key_vector(self) -> KeyVector:
        """Keys read so far for the in-progress command."""
        ...

    @abstractmethod
    def last_single_command_raw_keys(self) -> KeyVector:
        ...

    @abstractmethod
    def last_input_event(self) -> KeyEvent:
        ...

    def report_error(self, message: str) -> None:
        """
        Report a contained recording failure.

        Hosts override this to route messages to their own error channel.
        """
        logger.error(message)
