"""Dry-run a print job and show the order pages would be sent in."""

from __future__ import annotations

import argparse
import itertools
import logging
import sys
from typing import List, Optional, Sequence

from printjob import (
    DocumentDescriptor,
    InputFormat,
    JobParameters,
    PrintBackend,
    PrinterCapabilities,
    PrintingError,
)
from printjob.documents import describe_documents
from printjob.models import JobController, PageCrop, PageTransmitter, SourceInfo


class RecordingTransport(JobController, PageTransmitter):
    """Transport that accepts everything and remembers what it was sent."""

    def __init__(self):
        self._handles = itertools.count(1)
        self.sent: List[tuple] = []

    def init(self) -> None:
        pass

    def shutdown(self) -> None:
        pass

    def set_source_info(self, info: SourceInfo) -> None:
        pass

    def start_job(
        self,
        params: JobParameters,
        capabilities: PrinterCapabilities,
        documents: Sequence[DocumentDescriptor],
    ) -> int:
        return next(self._handles)

    def cancel_job(self, job_handle: int) -> None:
        pass

    def end_job(self, job_handle: int) -> None:
        pass

    def transmit_page(
        self,
        job_handle: int,
        page_number: int,
        content: Optional[str],
        is_last_page: bool,
        pdf_passthrough: bool,
        crop: Optional[PageCrop] = None,
    ) -> bool:
        self.sent.append((page_number, content, is_last_page))
        return True


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Show the page transmission plan of a print job")
    parser.add_argument("files", nargs="+", help="input documents")
    parser.add_argument("--range", dest="page_range", default=None, help="page range, e.g. 1-3,7,10-8")
    parser.add_argument("--face-up", action="store_true", help="printer stacks output face up")
    parser.add_argument("--duplex", default="long", help="none | long | short")
    parser.add_argument("--category", default="Doc", help="document category (Doc | Photo)")
    parser.add_argument("--scaling", nargs="*", default=["auto", "fit", "fill", "none"], help="supported print-scaling values")
    parser.add_argument("--raster", action="store_true", help="printer lacks PDF input")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    formats = InputFormat.PCLM | InputFormat.PWG_RASTER
    if not args.raster:
        formats |= InputFormat.PDF
    caps = PrinterCapabilities(
        name="dry-run",
        face_down_tray=not args.face_up,
        duplex=True,
        print_scalings_supported=tuple(args.scaling),
        supported_input_formats=formats,
    )
    params = JobParameters(page_range=args.page_range, duplex=args.duplex, doc_category=args.category)

    transport = RecordingTransport()
    backend = PrintBackend(transport, transport)
    try:
        handle, final = backend.start_job(params, caps, describe_documents(args.files))
    except PrintingError as exc:
        print(f"[FAIL] {exc}")
        return 1

    print(f"job {handle}: format={final.print_format} scaling={final.print_scaling or '-'} duplex={final.duplex}")
    for page_number, content, is_last in transport.sent:
        if is_last:
            print("  <end of job>")
        else:
            print(f"  {content} page {page_number}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
