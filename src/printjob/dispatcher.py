"""Print backend facade used by the embedding application."""

from __future__ import annotations

import dataclasses
import logging
from typing import List, Optional, Sequence, Tuple

from .callbacks import JobListener, init_listener, shutdown_listener
from .errors import (
    CapabilityError,
    CapabilityMismatchError,
    PrintJobSubmissionError,
)
from .models import (
    CapabilityProvider,
    DocumentDescriptor,
    JobController,
    JobParameters,
    PageSubmission,
    PageTransmitter,
    PrinterCapabilities,
    SourceInfo,
)
from .page_order import PageOrderComposer, apply_smart_duplex
from .page_selection import resolve_page_range
from .scaling import PRINT_FORMAT_PDF, select_print_format, select_print_scaling

logger = logging.getLogger(__name__)


def downgrade_unsupported(capabilities: PrinterCapabilities) -> PrinterCapabilities:
    """Mark printers speaking a protocol version below 1.x as unsupported."""
    if capabilities.is_supported and capabilities.ipp_version_major < 1:
        logger.warning(
            "printer %s reports protocol %s.%s, marking unsupported",
            capabilities.name,
            capabilities.ipp_version_major,
            capabilities.ipp_version_minor,
        )
        return dataclasses.replace(capabilities, is_supported=False)
    return capabilities


def build_submissions(
    documents: Sequence[DocumentDescriptor],
    page_range: Optional[str],
) -> List[PageSubmission]:
    """Resolve the job's page range against every paginated document."""
    submissions = []
    for document in documents:
        submission = PageSubmission(document=document)
        if document.is_paginated:
            resolved = resolve_page_range(page_range, document.page_count)
            submission.pages = resolved.pages
            submission.page_range = resolved.display
        submissions.append(submission)
    return submissions


class PrintBackend:
    """Facade over the transport: job preparation, submission and lifecycle."""

    def __init__(
        self,
        controller: JobController,
        transmitter: PageTransmitter,
        capability_provider: Optional[CapabilityProvider] = None,
    ):
        self.controller = controller
        self.transmitter = transmitter
        self.capability_provider = capability_provider
        self.composer = PageOrderComposer(transmitter, controller)

    def init(self, listener: JobListener) -> None:
        init_listener(listener)
        self.controller.init()

    def exit(self) -> None:
        shutdown_listener()
        self.controller.shutdown()

    def set_source_info(self, app_name: str, app_version: str, os_name: str) -> None:
        self.controller.set_source_info(SourceInfo(app_name, app_version, os_name))

    def get_capabilities(
        self,
        address: str,
        port: int,
        resource: str = "ipp/print",
        scheme: str = "ipp",
        timeout: float = 15.0,
    ) -> PrinterCapabilities:
        if self.capability_provider is None:
            raise CapabilityError("No capability provider configured.")
        caps = self.capability_provider.get_capabilities(address, port, resource, scheme, timeout)
        return downgrade_unsupported(caps)

    @staticmethod
    def default_job_parameters() -> JobParameters:
        return JobParameters()

    @staticmethod
    def final_job_parameters(
        params: JobParameters,
        capabilities: PrinterCapabilities,
    ) -> JobParameters:
        final = params.normalized()
        if not capabilities.duplex:
            final.duplex = "none"
        if capabilities.certificate is not None:
            final.certificate = bytes(capabilities.certificate)
        return final

    def prepare_job(
        self,
        params: JobParameters,
        capabilities: PrinterCapabilities,
        documents: Sequence[DocumentDescriptor],
    ) -> Tuple[JobParameters, List[PageSubmission]]:
        """
        Finalize a copy of ``params`` for ``documents`` without submitting.

        Resolves page ranges, applies smart duplex, picks format and scaling,
        totals the page count and copies the printer certificate.
        """
        if not documents:
            raise PrintJobSubmissionError("Empty file list.")
        if not capabilities.is_supported:
            raise CapabilityMismatchError(
                f"Printer '{capabilities.name}' is not supported."
            )

        # one transmission format per job
        mime_type = documents[0].mime_type
        mixed = sorted({doc.mime_type for doc in documents} - {mime_type})
        if mixed:
            raise PrintJobSubmissionError(
                f"Cannot mix {mime_type} with {', '.join(mixed)} in one job."
            )

        prepared = params.normalized()
        submissions = build_submissions(documents, prepared.page_range)
        apply_smart_duplex(prepared, submissions)

        prepared.print_format = select_print_format(mime_type, capabilities)
        if prepared.print_format == PRINT_FORMAT_PDF:
            logger.debug("PDF pass-through")
        prepared.print_scaling = select_print_scaling(
            prepared.print_format,
            capabilities,
            doc_category=prepared.doc_category,
            shared_photo=prepared.shared_photo,
            preserve_scaling=prepared.preserve_scaling,
        )
        logger.info("setting print-scaling value = %r", prepared.print_scaling)

        prepared.job_pages_per_set = sum(doc.page_count for doc in documents)
        prepared.certificate = (
            bytes(capabilities.certificate) if capabilities.certificate is not None else None
        )
        return prepared, submissions

    def start_job(
        self,
        params: JobParameters,
        capabilities: PrinterCapabilities,
        documents: Sequence[DocumentDescriptor],
    ) -> Tuple[int, JobParameters]:
        """
        Prepare, open and fill a job; returns its handle and final parameters.

        Raises PageTransmissionError (after cancelling and ending the job)
        when any page is rejected.
        """
        prepared, submissions = self.prepare_job(params, capabilities, documents)
        job_handle = self.controller.start_job(prepared, capabilities, documents)
        logger.info(
            "job %s started: %s document(s), %s page(s) per set",
            job_handle,
            len(documents),
            prepared.job_pages_per_set,
        )
        self.composer.submit(job_handle, submissions, capabilities.face_down_tray)
        return job_handle, prepared

    def cancel_job(self, job_handle: int) -> None:
        logger.info("cancelling job %s", job_handle)
        self.controller.cancel_job(job_handle)

    def end_job(self, job_handle: int) -> None:
        self.controller.end_job(job_handle)
