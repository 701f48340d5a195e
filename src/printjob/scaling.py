"""Print format and print-scaling selection for a job."""

from __future__ import annotations

import logging

from .errors import CapabilityMismatchError
from .models import PDF_MIME_TYPE, InputFormat, PrinterCapabilities

logger = logging.getLogger(__name__)

PRINT_FORMAT_PDF = "application/pdf"
PRINT_FORMAT_PCLM = "application/PCLm"
PRINT_FORMAT_PWG_RASTER = "image/pwg-raster"

SCALING_NONE = "none"
SCALING_AUTO = "auto"
SCALING_FIT = "fit"

PHOTO_CATEGORY = "photo"


def select_print_format(mime_type: str, capabilities: PrinterCapabilities) -> str:
    """Pick PDF passthrough when possible, otherwise a raster format."""
    if mime_type == PDF_MIME_TYPE and capabilities.supports_format(InputFormat.PDF):
        return PRINT_FORMAT_PDF
    if capabilities.supports_format(InputFormat.PCLM):
        return PRINT_FORMAT_PCLM
    if capabilities.supports_format(InputFormat.PWG_RASTER):
        return PRINT_FORMAT_PWG_RASTER
    raise CapabilityMismatchError(
        f"Printer '{capabilities.name}' accepts none of the formats for {mime_type!r}."
    )


def select_print_scaling(
    print_format: str,
    capabilities: PrinterCapabilities,
    doc_category: str | None = None,
    shared_photo: bool = False,
    preserve_scaling: bool = False,
) -> str:
    """
    Return the print-scaling value to send, or "" to send none.

    Raster formats only ever ask for "none". PDF passthrough keeps the
    document's own scale for shared photos and when asked to; otherwise it
    prefers "auto", then the printer default, then "fit".
    """
    if print_format != PRINT_FORMAT_PDF:
        logger.debug("raster format %s", print_format)
        return SCALING_NONE if capabilities.supports_scaling(SCALING_NONE) else ""

    is_photo = (doc_category or "").strip().lower() == PHOTO_CATEGORY
    if (is_photo and shared_photo) or preserve_scaling:
        return SCALING_NONE if capabilities.supports_scaling(SCALING_NONE) else ""
    if capabilities.supports_scaling(SCALING_AUTO):
        return SCALING_AUTO
    if capabilities.print_scaling_default:
        return capabilities.print_scaling_default
    return SCALING_FIT
