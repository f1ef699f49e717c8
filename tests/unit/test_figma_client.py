"""FigmaClient unit tests using httpx.MockTransport."""

import json

import httpx
import pytest

from design_review.exceptions import FigmaAPIError
from design_review.services import FigmaClient


def _transport(handler, captured: list):
    def wrapped(request: httpx.Request) -> httpx.Response:
        captured.append(request)
        return handler(request)

    return httpx.MockTransport(wrapped)


class TestFigmaClient:
    def test_requires_token(self):
        with pytest.raises(FigmaAPIError) as exc_info:
            FigmaClient("")
        assert exc_info.value.error_code == "ERR_FIGMA_001"

    def test_comment_body_with_and_without_node(self):
        assert FigmaClient.build_comment_body("hi") == {"message": "hi"}
        assert FigmaClient.build_comment_body("hi", "12:345") == {
            "message": "hi",
            "client_meta": {"node_id": "12:345", "node_offset": {"x": 0, "y": 0}},
        }

    @pytest.mark.asyncio
    async def test_post_comment_sends_token_and_body(self):
        captured = []
        transport = _transport(lambda r: httpx.Response(200, json={"id": "c1"}), captured)

        async with FigmaClient("secret", base_url="https://figma.test/v1", transport=transport) as client:
            result = await client.post_comment("ABC123", "[Validation] check", "12:345")

        assert result == {"id": "c1"}
        request = captured[0]
        assert request.method == "POST"
        assert str(request.url) == "https://figma.test/v1/files/ABC123/comments"
        assert request.headers["X-Figma-Token"] == "secret"
        assert json.loads(request.content) == {
            "message": "[Validation] check",
            "client_meta": {"node_id": "12:345", "node_offset": {"x": 0, "y": 0}},
        }

    @pytest.mark.asyncio
    async def test_error_message_from_api(self):
        transport = _transport(lambda r: httpx.Response(403, json={"status": 403, "message": "Invalid token"}), [])

        async with FigmaClient("bad", transport=transport) as client:
            with pytest.raises(FigmaAPIError) as exc_info:
                await client.post_comment("ABC123", "msg")

        assert exc_info.value.message == "Invalid token"
        assert exc_info.value.details["status_code"] == 403

    @pytest.mark.asyncio
    async def test_error_without_json_uses_status(self):
        transport = _transport(lambda r: httpx.Response(500, text="oops"), [])

        async with FigmaClient("token", transport=transport) as client:
            with pytest.raises(FigmaAPIError) as exc_info:
                await client.post_comment("ABC123", "msg")

        assert exc_info.value.message == "HTTP 500"

    @pytest.mark.asyncio
    async def test_network_error(self):
        def raise_connect(request):
            raise httpx.ConnectError("connection refused", request=request)

        async with FigmaClient("token", transport=httpx.MockTransport(raise_connect)) as client:
            with pytest.raises(FigmaAPIError) as exc_info:
                await client.post_comment("ABC123", "msg")

        assert "connection refused" in exc_info.value.message
