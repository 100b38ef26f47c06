"""Tests for MIME map resources."""

import json
from unittest.mock import patch

import pytest

from mime_scout.models import MimeRecord
from mime_scout.resources import extensions_resource, type_record_resource, types_resource
from mime_scout.services.lookup import MimeTypes


@pytest.fixture
def mime() -> MimeTypes:
    """Registry with a conflicting extension."""
    return MimeTypes(
        {
            "text/html": MimeRecord(source="iana", extensions=("html", "htm")),
            "image/bmp": MimeRecord(source="iana", extensions=("bmp",)),
            "image/x-ms-bmp": MimeRecord(source="nginx", extensions=("bmp",)),
            "multipart/form-data": MimeRecord(source="iana"),
        }
    )


@pytest.mark.asyncio
async def test_types_resource(mime: MimeTypes) -> None:
    """mime://types lists every extension with its resolved type."""
    with patch("mime_scout.resources.types.get_mime_types", return_value=mime):
        data = json.loads(await types_resource())

    assert data == {"bmp": "image/bmp", "htm": "text/html", "html": "text/html"}
    assert list(data) == sorted(data)


@pytest.mark.asyncio
async def test_extensions_resource(mime: MimeTypes) -> None:
    """mime://extensions lists types that have extensions."""
    with patch("mime_scout.resources.types.get_mime_types", return_value=mime):
        data = json.loads(await extensions_resource())

    assert data["text/html"] == ["html", "htm"]
    assert data["image/x-ms-bmp"] == ["bmp"]
    assert "multipart/form-data" not in data


@pytest.mark.asyncio
async def test_type_record_resource(mime: MimeTypes) -> None:
    """mime://type/{kind}/{subtype} returns the record with resolved defaults."""
    with patch("mime_scout.resources.types.get_mime_types", return_value=mime):
        data = json.loads(await type_record_resource("Text", "HTML"))

    assert data == {
        "type": "text/html",
        "source": "iana",
        "extensions": ["html", "htm"],
        "charset": None,
        "default_extension": "html",
        "default_charset": "UTF-8",
        "content_type": "text/html; charset=utf-8",
    }


@pytest.mark.asyncio
async def test_type_record_resource_unknown(mime: MimeTypes) -> None:
    """Unknown types give a readable message."""
    with patch("mime_scout.resources.types.get_mime_types", return_value=mime):
        result = await type_record_resource("text", "nope")

    assert result == "Unknown MIME type: text/nope"
