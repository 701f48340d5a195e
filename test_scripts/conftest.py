from __future__ import annotations

import itertools
from pathlib import Path
from typing import List, Optional, Sequence

import fitz
import pytest

from printjob import callbacks
from printjob.models import (
    CapabilityProvider,
    DocumentDescriptor,
    JobController,
    JobParameters,
    PageCrop,
    PageTransmitter,
    PrinterCapabilities,
    SourceInfo,
)


class FakeTransport(JobController, PageTransmitter):
    """Records transport calls; rejects the page numbers listed in ``fail_pages``."""

    def __init__(self, fail_pages: Sequence[int] = ()):
        self.fail_pages = set(fail_pages)
        self._handles = itertools.count(7)
        self.sent: List[tuple] = []
        self.calls: List[tuple] = []
        self.source_info: Optional[SourceInfo] = None
        self.started_params: Optional[JobParameters] = None

    def init(self) -> None:
        self.calls.append(("init",))

    def shutdown(self) -> None:
        self.calls.append(("shutdown",))

    def set_source_info(self, info: SourceInfo) -> None:
        self.source_info = info

    def start_job(
        self,
        params: JobParameters,
        capabilities: PrinterCapabilities,
        documents: Sequence[DocumentDescriptor],
    ) -> int:
        self.started_params = params
        handle = next(self._handles)
        self.calls.append(("start", handle))
        return handle

    def cancel_job(self, job_handle: int) -> None:
        self.calls.append(("cancel", job_handle))

    def end_job(self, job_handle: int) -> None:
        self.calls.append(("end", job_handle))

    def transmit_page(
        self,
        job_handle: int,
        page_number: int,
        content: Optional[str],
        is_last_page: bool,
        pdf_passthrough: bool,
        crop: Optional[PageCrop] = None,
    ) -> bool:
        self.sent.append((page_number, content, is_last_page, pdf_passthrough))
        return not (content is not None and page_number in self.fail_pages)

    @property
    def content_pages(self) -> List[tuple]:
        return [(content, page) for page, content, is_last, _ in self.sent if not is_last]

    @property
    def markers(self) -> List[tuple]:
        return [entry for entry in self.sent if entry[2]]


class FakeCapabilityProvider(CapabilityProvider):
    def __init__(self, caps: PrinterCapabilities):
        self.caps = caps
        self.requests: List[tuple] = []

    def get_capabilities(self, address, port, resource, scheme, timeout):
        self.requests.append((address, port, resource, scheme, timeout))
        return self.caps


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture(autouse=True)
def _reset_listener():
    yield
    callbacks.shutdown_listener()


@pytest.fixture
def make_pdf(tmp_path: Path):
    def _make(name: str, pages: int) -> Path:
        path = tmp_path / name
        doc = fitz.open()
        for idx in range(pages):
            page = doc.new_page()
            page.insert_text((72, 72), f"{name} page {idx + 1}", fontsize=12, fontname="helv")
        doc.save(path)
        doc.close()
        return path

    return _make
