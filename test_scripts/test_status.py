from __future__ import annotations

from printjob.callbacks import JobNotification, RawJobResult, RawJobState, build_event
from printjob.reasons import BlockedReason, ReasonSymbol
from printjob.status import JobStatusTracker


def test_tracker_accumulates_reasons_and_finishes():
    tracker = JobStatusTracker()
    tracker(1, build_event(1, JobNotification(state=RawJobState.RUNNING)))
    tracker(1, build_event(1, JobNotification(state=RawJobState.BLOCKED, reason_bits=BlockedReason.JAMMED.mask)))
    assert not tracker.is_finished(1)

    tracker(1, build_event(1, JobNotification(state=RawJobState.DONE, done_result=RawJobResult.OK)))
    assert tracker.is_finished(1)
    assert tracker.succeeded(1)
    assert tracker.reasons(1) == [ReasonSymbol.JAMMED]
    assert len(tracker.history(1)) == 3


def test_tracker_unknown_job():
    tracker = JobStatusTracker()
    assert tracker.latest(99) is None
    assert tracker.reasons(99) == []
    assert not tracker.is_finished(99)
    assert not tracker.succeeded(99)
