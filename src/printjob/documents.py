"""Input document inspection for job preparation."""

from __future__ import annotations

import logging
import mimetypes
from typing import List, Optional, Sequence

import fitz

from .models import PDF_MIME_TYPE, DocumentDescriptor

logger = logging.getLogger(__name__)

DEFAULT_MIME_TYPE = "application/octet-stream"


def guess_mime_type(path: str) -> str:
    mime_type, _ = mimetypes.guess_type(path)
    return mime_type or DEFAULT_MIME_TYPE


def get_page_count(path: str) -> int:
    """Page count of a PDF, or 0 when it cannot be opened."""
    try:
        doc = fitz.open(path)
    except Exception as exc:
        logger.error("page count error for %s: %s", path, exc)
        return 0
    try:
        return len(doc)
    finally:
        doc.close()


def describe_document(path: str, mime_type: Optional[str] = None) -> DocumentDescriptor:
    """Build the descriptor of one input file; only PDFs carry a page count."""
    mime_type = mime_type or guess_mime_type(path)
    page_count = 0
    if mime_type == PDF_MIME_TYPE:
        page_count = get_page_count(path)
        logger.info("pdf page count for %s: %s", path, page_count)
    return DocumentDescriptor(path=path, mime_type=mime_type, page_count=page_count)


def describe_documents(
    paths: Sequence[str],
    mime_type: Optional[str] = None,
) -> List[DocumentDescriptor]:
    return [describe_document(path, mime_type) for path in paths]
