"""
Shared fixtures: a scripted editor host.
"""

from typing import List, Optional

import pytest

from keyrecipe.core.keys import parse_keys
from keyrecipe.core.modes import ModeTag
from keyrecipe.session.host import EditorHost
from keyrecipe.session.recorder import RecordingSession


class FakeHost(EditorHost):
    """
    Host whose state is set directly by tests.

    raw_keys is what current_raw_key_vector() returns; tests change it
    between phase captures to mimic the editor reading more keys.
    """

    def __init__(
        self,
        command: str = "evil-delete",
        mode: ModeTag = ModeTag.NORMAL,
        cursors: bool = True,
        known: Optional[set] = None,
    ) -> None:
        self.command = command
        self.mode = mode
        self.cursors = cursors
        self.known = {"evil-delete", "evil-forward-word-begin", "evil-insert"} if known is None else known
        self.raw_keys = ()
        self.single_command_keys = ()
        self.last_event = "w"
        self.errors: List[str] = []

    def type_keys(self, text: str) -> None:
        self.raw_keys = parse_keys(text)

    def current_mode_tag(self) -> ModeTag:
        return self.mode

    def has_multiple_cursors(self) -> bool:
        return self.cursors

    def current_command(self) -> str:
        return self.command

    def is_known_replayable_command(self, command: str) -> bool:
        return command in self.known

    def current_raw_key_vector(self):
        return self.raw_keys

    def last_single_command_raw_keys(self):
        return self.single_command_keys

    def last_input_event(self):
        return self.last_event

    def report_error(self, message: str) -> None:
        self.errors.append(message)


@pytest.fixture
def host() -> FakeHost:
    return FakeHost()


@pytest.fixture
def session() -> RecordingSession:
    return RecordingSession()
