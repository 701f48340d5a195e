"""Print job preparation exceptions."""


class PrintingError(RuntimeError):
    """Base error for the print job core."""


class CapabilityError(PrintingError):
    """Raised when printer capabilities could not be obtained."""


class CapabilityMismatchError(PrintingError):
    """Raised when the printer cannot accept the job (protocol or format)."""


class PrintJobSubmissionError(PrintingError):
    """Raised when a print job cannot be started."""


class PageTransmissionError(PrintJobSubmissionError):
    """Raised when a page fails to transmit and the job was aborted."""

    def __init__(self, message: str, job_handle: int | None = None):
        super().__init__(message)
        self.job_handle = job_handle
