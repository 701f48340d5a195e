from __future__ import annotations

import pytest

from printjob.errors import CapabilityMismatchError
from printjob.models import InputFormat, PrinterCapabilities
from printjob.scaling import (
    PRINT_FORMAT_PCLM,
    PRINT_FORMAT_PDF,
    PRINT_FORMAT_PWG_RASTER,
    select_print_format,
    select_print_scaling,
)


def _caps(scalings=(), default="", formats=InputFormat.PDF):
    return PrinterCapabilities(
        print_scalings_supported=tuple(scalings),
        print_scaling_default=default,
        supported_input_formats=formats,
    )


def test_shared_photo_keeps_original_scale():
    caps = _caps(["auto", "none"])
    assert select_print_scaling(PRINT_FORMAT_PDF, caps, "Photo", shared_photo=True) == "none"


def test_photo_category_is_case_insensitive():
    caps = _caps(["auto", "none"])
    assert select_print_scaling(PRINT_FORMAT_PDF, caps, "PHOTO", shared_photo=True) == "none"


def test_photo_without_share_flag_uses_auto():
    caps = _caps(["auto", "none"])
    assert select_print_scaling(PRINT_FORMAT_PDF, caps, "Photo", shared_photo=False) == "auto"


def test_preserve_scaling_without_none_support_sends_nothing():
    caps = _caps(["auto", "fit"])
    assert select_print_scaling(PRINT_FORMAT_PDF, caps, "Doc", preserve_scaling=True) == ""


def test_pdf_prefers_auto():
    assert select_print_scaling(PRINT_FORMAT_PDF, _caps(["fit", "auto"]), "Doc") == "auto"


def test_pdf_falls_back_to_printer_default():
    caps = _caps(["fit-to-page"], default="fit-to-page")
    assert select_print_scaling(PRINT_FORMAT_PDF, caps, "Doc") == "fit-to-page"


def test_pdf_falls_back_to_fit():
    assert select_print_scaling(PRINT_FORMAT_PDF, _caps(["fill"]), "Doc") == "fit"


@pytest.mark.parametrize("fmt", [PRINT_FORMAT_PCLM, PRINT_FORMAT_PWG_RASTER])
def test_raster_uses_none_when_supported(fmt):
    assert select_print_scaling(fmt, _caps(["auto", "none"]), "Doc") == "none"
    assert select_print_scaling(fmt, _caps(["auto", "fit"]), "Doc") == ""


def test_print_format_selection():
    all_formats = InputFormat.PDF | InputFormat.PCLM | InputFormat.PWG_RASTER
    assert select_print_format("application/pdf", _caps(formats=all_formats)) == PRINT_FORMAT_PDF
    assert select_print_format("image/jpeg", _caps(formats=all_formats)) == PRINT_FORMAT_PCLM
    assert (
        select_print_format("application/pdf", _caps(formats=InputFormat.PWG_RASTER))
        == PRINT_FORMAT_PWG_RASTER
    )


def test_print_format_unsupported():
    with pytest.raises(CapabilityMismatchError):
        select_print_format("image/jpeg", _caps(formats=InputFormat.PDF))
