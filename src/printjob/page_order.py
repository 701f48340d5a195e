"""Transmission ordering of pages and documents for a print job."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence

from .errors import PageTransmissionError
from .models import JobController, JobParameters, PageSubmission, PageTransmitter

logger = logging.getLogger(__name__)


def transmission_order(pages: Sequence[int], face_down: bool) -> List[int]:
    """
    Order pages so the output stack reads top to bottom.

    Face-down trays put the first sheet at the bottom, so pages go out as
    given; face-up trays need the last page first.
    """
    if face_down:
        return list(pages)
    return list(reversed(pages))


def document_order(count: int, face_down: bool) -> List[int]:
    """Indices of the job's documents in submission order."""
    if face_down:
        return list(range(count))
    return list(range(count - 1, -1, -1))


def apply_smart_duplex(
    params: JobParameters,
    submissions: Sequence[PageSubmission],
) -> JobParameters:
    """
    Disable duplex when a single-document job prints on one sheet side only.

    Returns ``params`` itself, updated in place when duplex is switched off.
    """
    if len(submissions) != 1:
        return params
    only = submissions[0]
    if not only.document.is_paginated:
        logger.info("smart duplex, disabling duplex for non-paginated %s", only.document.path)
        params.duplex = "none"
    elif len(only.pages) == 1:
        logger.info("smart duplex, disabling duplex for single page of %s", only.document.path)
        params.duplex = "none"
    return params


class PageOrderComposer:
    """Feeds a job's pages to the transmitter in stacking-correct order."""

    def __init__(self, transmitter: PageTransmitter, controller: JobController):
        self.transmitter = transmitter
        self.controller = controller

    def submit_document_pages(
        self,
        job_handle: int,
        submission: PageSubmission,
        face_down: bool,
    ) -> bool:
        """Send one paginated document; stop at the first rejected page."""
        ok = False
        ordered = transmission_order(submission.pages, face_down)
        if not face_down:
            logger.debug("pages print face up, sending %s in reverse", submission.document.path)
        for page_number in ordered:
            logger.debug("sending %s page %s", submission.document.path, page_number)
            ok = self.transmitter.transmit_page(
                job_handle,
                page_number,
                submission.document.path,
                False,
                True,
            )
            if not ok:
                break
        logger.debug(
            "document %s sent: %s",
            submission.document.path,
            "OK" if ok else "ERROR",
        )
        return ok

    def _iter_submissions(
        self,
        submissions: Sequence[PageSubmission],
        face_down: bool,
    ) -> Iterable[tuple[int, PageSubmission]]:
        for position, index in enumerate(document_order(len(submissions), face_down), start=1):
            yield position, submissions[index]

    def submit(
        self,
        job_handle: int,
        submissions: Sequence[PageSubmission],
        face_down: bool,
    ) -> None:
        """
        Send every document of a started job, then the end-of-job marker.

        On a transmission failure the job is cancelled and ended and
        PageTransmissionError is raised.
        """
        ok = True
        position = 0
        failed_path: Optional[str] = None
        for position, submission in self._iter_submissions(submissions, face_down):
            document = submission.document
            if document.is_paginated:
                ok = self.submit_document_pages(job_handle, submission, face_down)
            else:
                ok = self.transmitter.transmit_page(job_handle, position, document.path, False, False)
            if not ok:
                failed_path = document.path
                break

        # Marker carries the position after the last document walked.
        self.transmitter.transmit_page(job_handle, position + 1, None, True, False)

        if not ok:
            logger.error("failed to add pages of %s, aborting job %s", failed_path, job_handle)
            self.controller.cancel_job(job_handle)
            self.controller.end_job(job_handle)
            raise PageTransmissionError(
                f"Failed to transmit pages of '{failed_path}'; job {job_handle} aborted.",
                job_handle=job_handle,
            )
