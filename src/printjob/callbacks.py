"""Translation of transport job notifications into listener events."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Callable, Optional, Tuple

from .reasons import (
    BLOCKED_REASON_TABLE,
    FAILED_REASON_TABLE,
    BlockedReason,
    FailedReason,
    count_reason_bits,
    decode_reasons,
)

logger = logging.getLogger(__name__)


class RawJobState(IntEnum):
    """Job state codes delivered by the transport."""

    QUEUED = 0
    RUNNING = 1
    BLOCKED = 2
    DONE = 3


class RawJobResult(IntEnum):
    """Completion codes delivered with a DONE notification."""

    OK = 0
    ERROR = -1
    CANCELLED = -2
    CORRUPT = -3
    BAD_CERTIFICATE = -4


class JobState(str, Enum):
    QUEUED = "queued"
    RUNNING = "running"
    BLOCKED = "blocked"
    DONE = "done"
    OTHER = "other"


class JobOutcome(str, Enum):
    OK = "ok"
    ERROR = "error"
    CANCELLED = "cancelled"
    CORRUPT = "corrupt"
    BAD_CERTIFICATE = "bad-certificate"
    OTHER = "other"


_STATE_MAP = {
    RawJobState.QUEUED: JobState.QUEUED,
    RawJobState.RUNNING: JobState.RUNNING,
    RawJobState.BLOCKED: JobState.BLOCKED,
    RawJobState.DONE: JobState.DONE,
}

_OUTCOME_MAP = {
    RawJobResult.OK: JobOutcome.OK,
    RawJobResult.ERROR: JobOutcome.ERROR,
    RawJobResult.CANCELLED: JobOutcome.CANCELLED,
    RawJobResult.CORRUPT: JobOutcome.CORRUPT,
    RawJobResult.BAD_CERTIFICATE: JobOutcome.BAD_CERTIFICATE,
}

_FAILED_OUTCOMES = {JobOutcome.ERROR, JobOutcome.CORRUPT}


@dataclass(frozen=True, slots=True)
class JobNotification:
    """Raw progress report from the transport."""

    state: int
    done_result: int = RawJobResult.OK
    reason_bits: int = 0
    certificate: Optional[bytes] = None


@dataclass(frozen=True, slots=True)
class JobCallbackEvent:
    """Structured job status handed to the listener."""

    job_id: int
    state: JobState
    outcome: Optional[JobOutcome] = None
    reasons: Tuple[str, ...] = ()
    certificate: Optional[bytes] = None

    @property
    def is_terminal(self) -> bool:
        return self.state is JobState.DONE


JobListener = Callable[[int, JobCallbackEvent], None]


def map_job_state(raw_state: int) -> JobState:
    try:
        return _STATE_MAP[RawJobState(raw_state)]
    except ValueError:
        return JobState.OTHER


def map_job_outcome(raw_result: int) -> JobOutcome:
    try:
        return _OUTCOME_MAP[RawJobResult(raw_result)]
    except ValueError:
        return JobOutcome.OTHER


def build_event(job_id: int, notification: JobNotification) -> JobCallbackEvent:
    """Assemble the listener event for one notification."""
    state = map_job_state(notification.state)
    outcome = map_job_outcome(notification.done_result) if state is JobState.DONE else None

    if outcome in _FAILED_OUTCOMES:
        bound, table = int(FailedReason.MAX_VALUE), FAILED_REASON_TABLE
    else:
        bound, table = int(BlockedReason.MAX_STATE), BLOCKED_REASON_TABLE

    reasons: Tuple[str, ...] = ()
    count = count_reason_bits(notification.reason_bits, bound)
    if count > 0:
        reasons = decode_reasons(notification.reason_bits, bound, table, count)

    certificate = None
    if notification.certificate:
        logger.debug("job %s: copying certificate len=%s", job_id, len(notification.certificate))
        certificate = bytes(notification.certificate)

    return JobCallbackEvent(
        job_id=job_id,
        state=state,
        outcome=outcome,
        reasons=reasons,
        certificate=certificate,
    )


class JobCallbackDispatcher:
    """
    Forwards each transport notification to a single listener.

    Called from whatever thread the transport reports on; keeps no per-call
    state, so concurrent notifications are safe as long as the listener is.
    """

    def __init__(self, listener: JobListener):
        self.listener = listener

    def dispatch(self, job_id: int, notification: JobNotification) -> JobCallbackEvent:
        event = build_event(job_id, notification)
        logger.debug(
            "job %s: state=%s outcome=%s reasons=%s",
            job_id,
            event.state.value,
            event.outcome.value if event.outcome else None,
            list(event.reasons),
        )
        self.listener(job_id, event)
        return event

    __call__ = dispatch


_active_dispatcher: Optional[JobCallbackDispatcher] = None
_registry_lock = threading.Lock()


def init_listener(listener: JobListener) -> JobCallbackDispatcher:
    """Install the process-wide listener; replaces any previous one."""
    global _active_dispatcher
    with _registry_lock:
        _active_dispatcher = JobCallbackDispatcher(listener)
        return _active_dispatcher


def shutdown_listener() -> None:
    global _active_dispatcher
    with _registry_lock:
        _active_dispatcher = None


def get_active_listener() -> Optional[JobListener]:
    dispatcher = _active_dispatcher
    return dispatcher.listener if dispatcher is not None else None


def dispatch_notification(job_id: int, notification: JobNotification) -> Optional[JobCallbackEvent]:
    """Entry point for transport threads; returns None when no listener is installed."""
    dispatcher = _active_dispatcher
    if dispatcher is None:
        logger.warning("job %s: notification dropped, no active listener", job_id)
        return None
    return dispatcher.dispatch(job_id, notification)
