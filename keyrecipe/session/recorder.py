"""
Recording session: captures one command's key phases while it runs.

The host drives a session through the lifecycle of each command:

    begin(session, host)               # command starts
    save_motion(session, host, "pre")  # zero or more phase captures
    save_operator(session, host, "post")
    result = finish(session, host)     # command ends

finish() resolves the captured phases and always leaves the session idle.
CommandRecorder binds a session to a host and reports contained failures.
"""

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Iterator, Optional, Union

from ..config import RecorderConfig
from ..core.errors import KeyRecipeError
from ..core.keys import EMPTY, KeyEvent, KeyVector
from ..core.modes import ModeTag
from ..core.record import CommandRecord, Slot
from ..core.resolver import finalize
from ..logging_config import get_logger
from .host import EditorHost

logger = logging.getLogger(__name__)


class Phase(str, Enum):
    PRE = "pre"
    POST = "post"


_MOTION_SLOTS = {Phase.PRE: Slot.KEYS_MOTION_PRE, Phase.POST: Slot.KEYS_MOTION_POST}
_OPERATOR_SLOTS = {Phase.PRE: Slot.KEYS_OPERATOR_PRE, Phase.POST: Slot.KEYS_OPERATOR_POST}


class RecordingSession:
    """
    Recording state for the command currently executing.

    Fields:
        active: True between a successful begin() and finish()
        executing: True while recorded keys are being replayed
        record: Record of the command being recorded, None when idle
        pending_error: Failure raised by a phase capture, returned by finish()
    """

    def __init__(self) -> None:
        self.active: bool = False
        self.executing: bool = False
        self.record: Optional[CommandRecord] = None
        self.pending_error: Optional[KeyRecipeError] = None

    def is_recording(self) -> bool:
        return self.active

    def is_replaying(self) -> bool:
        return self.executing

    @contextmanager
    def replaying(self) -> Iterator["RecordingSession"]:
        """Flag the session as replaying; begin() is ignored meanwhile."""
        previous = self.executing
        self.executing = True
        try:
            yield self
        finally:
            self.executing = previous


@dataclass(frozen=True)
class FinishResult:
    """
    Outcome of finish().

    Fields:
        command: Name of the command that was recorded, None if none was
        record: Finalized record on success
        error: Failure raised by a phase capture or while finalizing; the
            record is discarded
    """
    command: Optional[str] = None
    record: Optional[CommandRecord] = None
    error: Optional[Exception] = None

    @property
    def recorded(self) -> bool:
        return self.record is not None

    @property
    def failed(self) -> bool:
        return self.error is not None


def _capture(keys: Optional[Iterable[KeyEvent]]) -> KeyVector:
    return EMPTY if keys is None else tuple(keys)


def reset(session: RecordingSession) -> None:
    """Drop the record and leave recording mode."""
    session.record = None
    session.active = False
    session.pending_error = None


def begin(
    session: RecordingSession, host: EditorHost, config: Optional[RecorderConfig] = None
) -> bool:
    """
    Start recording the command the host is about to run.

    A no-op while replaying, or while already recording the same command.
    A record left behind by a different command that never reached
    finish() is dropped. Records only when several cursors exist, the host
    is not in emacs mode and the command is replayable.

    Returns:
        True if recording started
    """
    if session.executing:
        return False
    if session.active:
        stale = session.record.command_name()
        if stale == host.current_command():
            return False
        logger.debug("Dropping unfinished record of %s", stale)
    reset(session)

    config = config or RecorderConfig()
    if not host.has_multiple_cursors():
        return False
    mode = host.current_mode_tag()
    if mode == ModeTag.EMACS:
        return False
    command = host.current_command()
    if not (host.is_known_replayable_command(command) or config.is_custom_known(command)):
        logger.debug("Skipping unknown command %s", command)
        return False

    record = CommandRecord()
    record.update({
        Slot.NAME: command,
        Slot.KEYS_PRE: _capture(host.current_raw_key_vector()),
        Slot.STATE_BEGIN: mode,
    })
    session.record = record
    session.active = True
    return True


def _append(session: RecordingSession, slot: Slot, host: EditorHost) -> None:
    # After a failed capture the record is void; finish() reports the first error.
    if session.pending_error is not None:
        return
    try:
        session.record.append(slot, _capture(host.current_raw_key_vector()))
    except KeyRecipeError as exc:
        session.pending_error = exc


def save_motion(session: RecordingSession, host: EditorHost, phase: Union[Phase, str]) -> None:
    """Append the host's current keys to the motion phase slot."""
    if not session.active:
        return
    _append(session, _MOTION_SLOTS[Phase(phase)], host)


def save_operator(session: RecordingSession, host: EditorHost, phase: Union[Phase, str]) -> None:
    """Append the host's current keys to the operator phase slot (operator mode only)."""
    if not session.active or host.current_mode_tag() != ModeTag.OPERATOR:
        return
    _append(session, _OPERATOR_SLOTS[Phase(phase)], host)


def finish(session: RecordingSession, host: EditorHost) -> FinishResult:
    """
    Complete the record and resolve its keys.

    Never raises for failures while capturing or completing the record;
    they are returned in FinishResult.error. The session is reset in every
    case.
    """
    if not session.active:
        return FinishResult()

    record = session.record
    command = record.command_name()
    if session.pending_error is not None:
        error = session.pending_error
        reset(session)
        return FinishResult(command=command, error=error)
    try:
        record.update({
            Slot.STATE_END: host.current_mode_tag(),
            Slot.LAST_INPUT: host.last_input_event(),
            Slot.KEYS_POST: _capture(host.current_raw_key_vector()),
            Slot.KEYS_POST_RAW: _capture(host.last_single_command_raw_keys()),
        })
        finalize(record)
    except Exception as exc:
        return FinishResult(command=command, error=exc)
    finally:
        reset(session)
    return FinishResult(command=command, record=record)


class CommandRecorder:
    """
    Host-facing recorder bound to one editor host.

    Usage:
        recorder = CommandRecorder(host, on_recorded=replay_for_other_cursors)
        recorder.begin_command()
        ...
        recorder.finish_command()

    on_recorded receives the finalized record while the session is flagged
    as replaying, so commands it replays are not recorded themselves.
    """

    def __init__(
        self,
        host: EditorHost,
        config: Optional[RecorderConfig] = None,
        on_recorded: Optional[Callable[[CommandRecord], None]] = None,
        session: Optional[RecordingSession] = None,
    ) -> None:
        self.host = host
        self.config = config or RecorderConfig.from_env()
        self.on_recorded = on_recorded
        self.session = session or RecordingSession()

    def is_recording(self) -> bool:
        return self.session.is_recording()

    def is_replaying(self) -> bool:
        return self.session.is_replaying()

    def begin_command(self) -> bool:
        started = begin(self.session, self.host, self.config)
        if started:
            log = get_logger(__name__, command=self.session.record.command_name())
            log.debug("Recording command")
        return started

    def save_motion(self, phase: Union[Phase, str]) -> None:
        save_motion(self.session, self.host, phase)

    def save_operator(self, phase: Union[Phase, str]) -> None:
        save_operator(self.session, self.host, phase)

    def finish_command(self) -> FinishResult:
        result = finish(self.session, self.host)
        log = get_logger(__name__, command=result.command)

        if result.failed:
            err = result.error
            message = f"keyrecipe: {result.command}: {type(err).__name__}: {err}"
            log.error("Discarded command record: %s", err)
            self.host.report_error(message)
            return result

        if not result.recorded:
            return result

        record = result.record
        if self.config.debug:
            log.info("Recorded command %s", record.to_dict())
        if self.on_recorded is not None:
            with self.session.replaying():
                self.on_recorded(record)
        return result
