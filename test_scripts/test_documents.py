from __future__ import annotations

from printjob.documents import describe_document, describe_documents, get_page_count, guess_mime_type


def test_pdf_page_count(make_pdf):
    path = make_pdf("five.pdf", 5)
    assert get_page_count(str(path)) == 5
    descriptor = describe_document(str(path))
    assert descriptor.mime_type == "application/pdf"
    assert descriptor.page_count == 5
    assert descriptor.is_paginated


def test_unreadable_pdf_counts_zero(tmp_path):
    broken = tmp_path / "broken.pdf"
    broken.write_bytes(b"not a pdf")
    assert get_page_count(str(broken)) == 0


def test_non_pdf_has_no_pages(tmp_path):
    photo = tmp_path / "photo.jpg"
    photo.write_bytes(b"\xff\xd8\xff")
    descriptor = describe_document(str(photo))
    assert descriptor.mime_type == "image/jpeg"
    assert descriptor.page_count == 0
    assert not descriptor.is_paginated


def test_explicit_mime_type_wins(make_pdf):
    path = make_pdf("doc.bin.pdf", 2)
    docs = describe_documents([str(path)], mime_type="image/jpeg")
    assert docs[0].page_count == 0


def test_guess_mime_type_default():
    assert guess_mime_type("noext") == "application/octet-stream"
