"""
Recorder configuration.

Environment Variables:
    KEYRECIPE_DEBUG: Log every finished command record (1/true/yes/on) - default: off
    KEYRECIPE_KNOWN_COMMANDS: Comma separated commands treated as replayable
        in addition to the host's own known commands - default: none
"""

import os
from dataclasses import dataclass, field
from typing import FrozenSet, Mapping, Optional

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class RecorderConfig:
    """
    Recorder settings.

    Fields:
        debug: Log the finalized record of every recorded command
        custom_known_commands: Extra command names to record
    """
    debug: bool = False
    custom_known_commands: FrozenSet[str] = field(default_factory=frozenset)

    def is_custom_known(self, command: Optional[str]) -> bool:
        return command is not None and command in self.custom_known_commands

    @staticmethod
    def from_env(environ: Optional[Mapping[str, str]] = None) -> "RecorderConfig":
        env = os.environ if environ is None else environ
        debug = env.get("KEYRECIPE_DEBUG", "").strip().lower() in _TRUTHY
        raw = env.get("KEYRECIPE_KNOWN_COMMANDS", "")
        commands = frozenset(c.strip() for c in raw.split(",") if c.strip())
        return RecorderConfig(debug=debug, custom_known_commands=commands)
