"""Listener that keeps the latest status of every job."""

from __future__ import annotations

import threading
from typing import Dict, List, Optional

from .callbacks import JobCallbackEvent, JobOutcome


class JobStatusTracker:
    """
    Job listener that records events per job.

    Notifications can arrive on transport threads, so all state is guarded by
    the tracker's own lock.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._latest: Dict[int, JobCallbackEvent] = {}
        self._reasons: Dict[int, List[str]] = {}
        self._history: Dict[int, List[JobCallbackEvent]] = {}

    def __call__(self, job_id: int, event: JobCallbackEvent) -> None:
        with self._lock:
            self._latest[job_id] = event
            self._reasons.setdefault(job_id, []).extend(event.reasons)
            self._history.setdefault(job_id, []).append(event)

    def latest(self, job_id: int) -> Optional[JobCallbackEvent]:
        with self._lock:
            return self._latest.get(job_id)

    def reasons(self, job_id: int) -> List[str]:
        """All reasons reported for a job so far, in arrival order."""
        with self._lock:
            return list(self._reasons.get(job_id, []))

    def history(self, job_id: int) -> List[JobCallbackEvent]:
        with self._lock:
            return list(self._history.get(job_id, []))

    def is_finished(self, job_id: int) -> bool:
        event = self.latest(job_id)
        return event is not None and event.is_terminal

    def succeeded(self, job_id: int) -> bool:
        event = self.latest(job_id)
        return event is not None and event.outcome is JobOutcome.OK
