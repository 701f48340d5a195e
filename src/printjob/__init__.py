"""Print job sequencing core: page ranges, ordering, scaling and job status."""

from .callbacks import (
    JobCallbackDispatcher,
    JobCallbackEvent,
    JobNotification,
    JobOutcome,
    JobState,
    dispatch_notification,
    init_listener,
    shutdown_listener,
)
from .dispatcher import PrintBackend
from .errors import (
    CapabilityError,
    CapabilityMismatchError,
    PageTransmissionError,
    PrintingError,
    PrintJobSubmissionError,
)
from .models import (
    DocumentDescriptor,
    InputFormat,
    JobParameters,
    PrinterCapabilities,
)
from .page_selection import PageRangeResult, resolve_page_range
from .status import JobStatusTracker

__all__ = [
    "PrintBackend",
    "DocumentDescriptor",
    "InputFormat",
    "JobParameters",
    "PrinterCapabilities",
    "PageRangeResult",
    "resolve_page_range",
    "JobCallbackDispatcher",
    "JobCallbackEvent",
    "JobNotification",
    "JobOutcome",
    "JobState",
    "JobStatusTracker",
    "dispatch_notification",
    "init_listener",
    "shutdown_listener",
    "PrintingError",
    "CapabilityError",
    "CapabilityMismatchError",
    "PrintJobSubmissionError",
    "PageTransmissionError",
]
