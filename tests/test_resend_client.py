import asyncio
import json
import sys
from pathlib import Path

import httpx
import pytest

PROJECT_DIR = Path(__file__).resolve().parents[1]
if str(PROJECT_DIR) not in sys.path:
    sys.path.insert(0, str(PROJECT_DIR))

from src.shared.contact.resend_client import ResendError, send_email


def _send(handler, **overrides):
    async def run():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            kwargs = {
                "api_key": "re_test_key",
                "sender": "portfolio@example.com",
                "to": "owner@example.com",
                "subject": "New portfolio message from Jo",
                "html": "<p>Hello</p>",
                "client": client,
            }
            kwargs.update(overrides)
            return await send_email(**kwargs)

    return asyncio.run(run())


def test_send_posts_message_and_returns_id():
    seen = []

    def handler(request: httpx.Request):
        seen.append(request)
        return httpx.Response(200, json={"id": "4ef9a417-02e9-4d39-ad75-9611e0fcc33c"})

    message_id = _send(handler, reply_to="jo@example.com", timeout=2.5)

    assert message_id == "4ef9a417-02e9-4d39-ad75-9611e0fcc33c"
    request = seen[0]
    assert request.method == "POST"
    assert str(request.url) == "https://api.resend.com/emails"
    assert request.headers["Authorization"] == "Bearer re_test_key"
    body = json.loads(request.content)
    assert body == {
        "from": "portfolio@example.com",
        "to": ["owner@example.com"],
        "subject": "New portfolio message from Jo",
        "html": "<p>Hello</p>",
        "reply_to": "jo@example.com",
    }
    assert request.extensions["timeout"]["read"] == 2.5


def test_missing_id_returns_none():
    assert _send(lambda request: httpx.Response(200, json={})) is None


def test_provider_error_body_is_kept():
    error_body = {"statusCode": 422, "name": "validation_error", "message": "Invalid `to` field."}

    with pytest.raises(ResendError) as excinfo:
        _send(lambda request: httpx.Response(422, json=error_body))

    assert excinfo.value.detail == error_body
    assert str(excinfo.value) == "Invalid `to` field."


def test_non_json_error_body_is_wrapped():
    with pytest.raises(ResendError) as excinfo:
        _send(lambda request: httpx.Response(502, text="Bad Gateway"))

    assert excinfo.value.detail["name"] == "application_error"
    assert excinfo.value.detail["statusCode"] == 502
    assert excinfo.value.detail["message"] == "Bad Gateway"


def test_transport_failure_raises_resend_error():
    def handler(request: httpx.Request):
        raise httpx.ConnectTimeout("timed out", request=request)

    with pytest.raises(ResendError) as excinfo:
        _send(handler)

    assert excinfo.value.detail["name"] == "application_error"
    assert "timed out" in excinfo.value.detail["message"]
