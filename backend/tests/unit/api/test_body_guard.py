"""Unit tests for JSON body decoding used by the malformed-body guard."""

import pytest
from unittest.mock import AsyncMock, MagicMock

from api.body_guard import decode_json_object, json_body
from domain.user.core.exceptions.user_errors import MalformedBodyError


def _request(body: bytes, content_type: str | None = "application/json"):
    request = MagicMock()
    request.headers = {} if content_type is None else {"content-type": content_type}
    request.body = AsyncMock(return_value=body)
    return request


@pytest.mark.asyncio
async def test_decodes_object():
    assert await decode_json_object(_request(b'{"account": "abcd"}')) == {"account": "abcd"}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "content_type",
    ["application/json; charset=utf-8", "application/merge-patch+json", "APPLICATION/JSON"],
)
async def test_json_media_types(content_type):
    assert await decode_json_object(_request(b"{}", content_type)) == {}


@pytest.mark.asyncio
@pytest.mark.parametrize("body", [b"", b"   \n"])
async def test_empty_body_is_empty_object(body):
    assert await decode_json_object(_request(body)) == {}


@pytest.mark.asyncio
@pytest.mark.parametrize("content_type", [None, "text/plain", "multipart/form-data"])
async def test_non_json_content_is_not_read(content_type):
    request = _request(b"{broken", content_type)

    assert await decode_json_object(request) == {}
    request.body.assert_not_called()


@pytest.mark.asyncio
async def test_invalid_json_raises():
    with pytest.raises(MalformedBodyError) as exc_info:
        await decode_json_object(_request(b"{broken"))

    assert exc_info.value.reason == "invalid JSON"


@pytest.mark.asyncio
@pytest.mark.parametrize("body", [b"[]", b"42", b"null", b'"abcd"'])
async def test_non_object_raises(body):
    with pytest.raises(MalformedBodyError) as exc_info:
        await decode_json_object(_request(body))

    assert exc_info.value.reason == "JSON body must be an object"


def test_json_body_dependency_defaults_to_empty():
    request = MagicMock()
    request.state = MagicMock(spec=[])

    assert json_body(request) == {}


def test_json_body_dependency_returns_decoded_body():
    request = MagicMock()
    request.state.json_body = {"email": "a@b.com"}

    assert json_body(request) == {"email": "a@b.com"}
