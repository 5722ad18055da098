"""Tests for album id parsing."""

import uuid

import pytest

from backend.core.exceptions import AlbumNotFoundError, ValidationError
from backend.core.identifiers import coerce_album_id


def test_uuid_passes_through() -> None:
    value = uuid.uuid4()
    assert coerce_album_id(value) is value


def test_string_parsed() -> None:
    value = uuid.uuid4()
    assert coerce_album_id(str(value)) == value


@pytest.mark.parametrize("raw", [None, "", "   "])
def test_missing_id_is_validation_error(raw) -> None:
    with pytest.raises(ValidationError) as exc_info:
        coerce_album_id(raw)
    assert exc_info.value.field == "album_id"


def test_malformed_id_is_not_found() -> None:
    with pytest.raises(AlbumNotFoundError) as exc_info:
        coerce_album_id("not-a-uuid")
    assert exc_info.value.album_id == "not-a-uuid"
