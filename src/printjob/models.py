"""Job, document and printer models plus the collaborator contracts."""

from __future__ import annotations

import dataclasses
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import IntFlag
from typing import List, Optional, Sequence, Tuple

PDF_MIME_TYPE = "application/pdf"

_VALID_DUPLEX_MODES = {"none", "long", "short", "book"}


class InputFormat(IntFlag):
    """Document formats a printer advertises it can consume."""

    NONE = 0
    PDF = 1 << 0
    PCLM = 1 << 1
    PWG_RASTER = 1 << 2
    JPEG = 1 << 3


@dataclass(slots=True)
class DocumentDescriptor:
    """One input file of a job."""

    path: str
    mime_type: str
    page_count: int = 0  # 0 when not paginated

    @property
    def is_paginated(self) -> bool:
        return self.mime_type == PDF_MIME_TYPE


@dataclass(frozen=True, slots=True)
class PrinterCapabilities:
    """Printer-advertised capabilities; read-only for the duration of a job."""

    name: str = ""
    uuid: str = ""
    face_down_tray: bool = True
    duplex: bool = False
    print_scalings_supported: Tuple[str, ...] = ()
    print_scaling_default: str = ""
    supported_media_sizes: Tuple[str, ...] = ()
    supported_media_types: Tuple[str, ...] = ()
    supported_input_formats: InputFormat = InputFormat.NONE
    ipp_version_major: int = 1
    ipp_version_minor: int = 0
    is_supported: bool = True
    certificate: Optional[bytes] = None

    def supports_scaling(self, mode: str) -> bool:
        return mode in self.print_scalings_supported

    def supports_format(self, fmt: InputFormat) -> bool:
        return bool(self.supported_input_formats & fmt)


@dataclass(slots=True)
class JobParameters:
    """Caller-owned job settings; the core always works on a normalized copy."""

    job_name: str = "print_job"
    copies: int = 1
    duplex: str = "none"  # none | long | short | book
    render_flags: int = 0
    page_range: Optional[str] = None
    doc_category: str = "Doc"  # Doc | Photo
    media_size: str = ""
    media_type: str = ""
    margin_top: float = 0.0
    margin_bottom: float = 0.0
    margin_left: float = 0.0
    margin_right: float = 0.0
    color_mode: str = "color"  # color | grayscale
    shared_photo: bool = False
    preserve_scaling: bool = False
    print_scaling: str = ""
    print_format: str = ""
    pdf_render_resolution: int = 300
    job_pages_per_set: int = 0
    certificate: Optional[bytes] = None

    def copy(self, **changes) -> "JobParameters":
        return dataclasses.replace(self, **changes)

    def normalized(self) -> "JobParameters":
        """Return a normalized copy used by the job pipeline."""
        duplex = (self.duplex or "none").strip().lower()
        return self.copy(
            job_name=(self.job_name or "print_job").strip(),
            copies=max(1, int(self.copies)),
            duplex=duplex if duplex in _VALID_DUPLEX_MODES else "none",
            page_range=(self.page_range or "").strip() or None,
            doc_category=(self.doc_category or "Doc").strip(),
            color_mode=(self.color_mode or "color").strip().lower(),
            print_scaling=(self.print_scaling or "").strip().lower(),
            pdf_render_resolution=max(72, int(self.pdf_render_resolution)),
            margin_top=max(0.0, float(self.margin_top)),
            margin_bottom=max(0.0, float(self.margin_bottom)),
            margin_left=max(0.0, float(self.margin_left)),
            margin_right=max(0.0, float(self.margin_right)),
        )


@dataclass(slots=True)
class PageCrop:
    """Optional crop/offset applied to a transmitted page."""

    left: int = 0
    top: int = 0
    right: int = 0
    bottom: int = 0


@dataclass(slots=True)
class SourceInfo:
    """Identification of the submitting application."""

    app_name: str
    app_version: str
    os_name: str


class PageTransmitter(ABC):
    """Sends one page (or end-of-job marker) to the printer transport."""

    @abstractmethod
    def transmit_page(
        self,
        job_handle: int,
        page_number: int,
        content: Optional[str],
        is_last_page: bool,
        pdf_passthrough: bool,
        crop: Optional[PageCrop] = None,
    ) -> bool:
        """Return True when the page was accepted by the transport."""


class JobController(ABC):
    """Transport-side job lifecycle."""

    @abstractmethod
    def init(self) -> None:
        """Initialize the transport."""

    @abstractmethod
    def shutdown(self) -> None:
        """Release transport resources."""

    @abstractmethod
    def set_source_info(self, info: SourceInfo) -> None:
        """Record which application submits jobs."""

    @abstractmethod
    def start_job(
        self,
        params: JobParameters,
        capabilities: PrinterCapabilities,
        documents: Sequence[DocumentDescriptor],
    ) -> int:
        """Open a job and return its handle; raise PrintJobSubmissionError on failure."""

    @abstractmethod
    def cancel_job(self, job_handle: int) -> None:
        """Request cancellation of a job."""

    @abstractmethod
    def end_job(self, job_handle: int) -> None:
        """Close a job handle."""


class CapabilityProvider(ABC):
    """Queries a printer for its capabilities."""

    @abstractmethod
    def get_capabilities(
        self,
        address: str,
        port: int,
        resource: str,
        scheme: str,
        timeout: float,
    ) -> PrinterCapabilities:
        """Return capabilities; raise CapabilityError when the printer cannot be queried."""


@dataclass(slots=True)
class PageSubmission:
    """Resolved pages of one document, in document order."""

    document: DocumentDescriptor
    pages: List[int] = field(default_factory=list)
    page_range: str = ""
