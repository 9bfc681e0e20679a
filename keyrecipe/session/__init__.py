"""
Command recording session driven by the host editor.
"""

from .host import EditorHost
from .recorder import (
    CommandRecorder,
    FinishResult,
    Phase,
    RecordingSession,
    begin,
    finish,
    reset,
    save_motion,
    save_operator,
)

__all__ = [
    "EditorHost",
    "CommandRecorder",
    "FinishResult",
    "Phase",
    "RecordingSession",
    "begin",
    "finish",
    "reset",
    "save_motion",
    "save_operator",
]
