import json

import httpx
import pytest

from models.errors import FieldMissing, FieldTypeMismatch, TransportError
from services.lms_client import LmsClient


def make_client(handler) -> LmsClient:
    return LmsClient("192.168.0.10", 9000, transport=httpx.MockTransport(handler))


async def test_query_posts_slim_request_envelope():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"result": {"player count": 1}})

    client = make_client(handler)
    response = await client.query("-", ["serverstatus", 0, 9999])
    await client.aclose()

    assert seen["url"] == "http://192.168.0.10:9000/jsonrpc.js"
    assert seen["body"]["method"] == "slim.request"
    assert seen["body"]["params"] == ["-", ["serverstatus", 0, 9999]]
    assert response.get_uint("player count") == 1


async def test_network_error_is_transport_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    client = make_client(handler)
    with pytest.raises(TransportError):
        await client.query("-", ["serverstatus", 0, 9999])


async def test_timeout_is_transport_error():
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    client = make_client(handler)
    with pytest.raises(TransportError, match="timed out"):
        await client.query("p1", ["time", "?"])


async def test_http_error_status_is_transport_error():
    client = make_client(lambda request: httpx.Response(500, text="boom"))
    with pytest.raises(TransportError):
        await client.query("-", ["serverstatus", 0, 9999])


async def test_invalid_json_is_transport_error():
    client = make_client(lambda request: httpx.Response(200, text="<html>"))
    with pytest.raises(TransportError):
        await client.query("-", ["serverstatus", 0, 9999])


async def test_missing_result_is_field_missing():
    client = make_client(lambda request: httpx.Response(200, json={"id": 1}))
    with pytest.raises(FieldMissing):
        await client.query("-", ["serverstatus", 0, 9999])


async def test_non_object_result_is_type_mismatch():
    client = make_client(lambda request: httpx.Response(200, json={"result": [1, 2]}))
    with pytest.raises(FieldTypeMismatch):
        await client.query("-", ["serverstatus", 0, 9999])
