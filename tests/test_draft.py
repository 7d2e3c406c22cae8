"""Tests for new-product draft composition."""

import base64
import logging
import math

import pytest

from storefront.catalog.draft import DraftError, ProductDraft, parse_price

PNG_BYTES = b"\x89PNG\r\n\x1a\nfake"


@pytest.fixture
def draft():
    return ProductDraft(name="Lamp", price="19.90", description="Desk lamp")


def test_payload_without_image(draft):
    assert draft.to_payload() == {
        "name": "Lamp",
        "price": 19.9,
        "description": "Desk lamp",
        "imageUrl": "",
        "category": "",
    }


def test_image_is_embedded_as_data_uri(draft):
    assert draft.select_image("lamp.png", "image/png", PNG_BYTES) is True
    uri = draft.to_payload()["imageUrl"]
    prefix = "data:image/png;base64,"
    assert uri.startswith(prefix)
    assert base64.b64decode(uri[len(prefix):]) == PNG_BYTES


@pytest.mark.parametrize("content_type", ["text/plain", "application/pdf", "", None])
def test_non_image_is_ignored(draft, content_type):
    draft.select_image("lamp.png", "image/png", PNG_BYTES)
    assert draft.select_image("notes.txt", content_type, b"hello") is False
    assert draft.image.filename == "lamp.png"


def test_new_image_replaces_previous(draft):
    draft.select_image("a.png", "image/png", b"a")
    draft.select_image("b.jpg", "image/jpeg", b"b")
    assert draft.image.filename == "b.jpg"
    assert draft.to_payload()["imageUrl"].startswith("data:image/jpeg;base64,")


def test_select_image_file(draft, tmp_path):
    picture = tmp_path / "photo.jpg"
    picture.write_bytes(b"jpeg-data")
    notes = tmp_path / "notes.txt"
    notes.write_text("not an image")

    assert draft.select_image_file(notes) is False
    assert draft.image is None
    assert draft.select_image_file(picture) is True
    assert draft.image.content_type == "image/jpeg"
    assert draft.image.data == b"jpeg-data"


def test_non_numeric_price_is_nan(draft):
    draft.price = "abc"
    assert math.isnan(draft.to_payload()["price"])
    assert math.isnan(parse_price("12,5"))


def test_missing_required_fields(draft):
    draft.description = "  "
    draft.price = ""
    assert draft.missing_fields() == ["price", "description"]
    with pytest.raises(DraftError):
        draft.to_payload()


def test_reset(draft):
    draft.select_image("a.png", "image/png", b"a")
    draft.reset()
    assert (draft.name, draft.price, draft.description, draft.image) == ("", "", "", None)


def test_ignored_selection_is_logged_at_debug(draft, caplog):
    caplog.set_level(logging.DEBUG, logger="storefront.catalog.draft")
    draft.select_image("notes.txt", "text/plain", b"x")
    assert "Ignoring non-image selection notes.txt" in caplog.text
