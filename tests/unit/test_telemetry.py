"""Unit tests for the anonymous telemetry service."""

import json

import httpx
import pytest

from design_review.config import Settings
from design_review.services import Telemetry


TELEMETRY_URL = "https://telemetry.test/events"


@pytest.fixture
def config_path(tmp_path):
    return tmp_path / "telemetry.json"


def _settings(**overrides) -> Settings:
    values = {"DESIGN_REVIEW_TELEMETRY_URL": TELEMETRY_URL}
    values.update(overrides)
    return Settings(**values)


class TestTelemetryEnabled:
    def test_disabled_without_url(self, config_path):
        assert Telemetry(Settings(), config_path=config_path).enabled is False

    def test_disabled_by_opt_out(self, config_path):
        assert Telemetry(_settings(), opt_out=True, config_path=config_path).enabled is False

    def test_disabled_by_setting(self, config_path):
        assert Telemetry(_settings(DESIGN_REVIEW_TELEMETRY=False), config_path=config_path).enabled is False

    def test_enabled_with_url(self, config_path):
        assert Telemetry(_settings(), config_path=config_path).enabled is True


class TestAnonId:
    def test_generated_once_and_persisted(self, config_path):
        telemetry = Telemetry(_settings(), config_path=config_path)
        first = telemetry.anon_id()
        second = Telemetry(_settings(), config_path=config_path).anon_id()

        assert first == second
        assert json.loads(config_path.read_text(encoding="utf-8"))["anon_id"] == first

    def test_corrupt_config_is_replaced(self, config_path):
        config_path.write_text("not json", encoding="utf-8")
        anon_id = Telemetry(_settings(), config_path=config_path).anon_id()
        assert anon_id
        assert json.loads(config_path.read_text(encoding="utf-8"))["anon_id"] == anon_id


class TestTrack:
    @pytest.mark.asyncio
    async def test_disabled_sends_nothing(self, config_path):
        calls = []
        transport = httpx.MockTransport(lambda r: calls.append(r) or httpx.Response(200))
        telemetry = Telemetry(Settings(), config_path=config_path, transport=transport)

        assert await telemetry.track("cmd_review") is False
        assert calls == []
        assert not config_path.exists()

    @pytest.mark.asyncio
    async def test_posts_event(self, config_path):
        calls = []
        transport = httpx.MockTransport(lambda r: calls.append(r) or httpx.Response(204))
        telemetry = Telemetry(_settings(), config_path=config_path, transport=transport)

        assert await telemetry.track("cmd_review", {"mode": "single"}) is True

        payload = json.loads(calls[0].content)
        assert str(calls[0].url) == TELEMETRY_URL
        assert payload["event"] == "cmd_review"
        assert payload["anon_id"] == telemetry.anon_id()
        assert payload["props"]["mode"] == "single"
        assert "version" in payload["props"]

    @pytest.mark.asyncio
    async def test_failure_is_swallowed(self, config_path):
        def fail(request):
            raise httpx.ConnectError("down", request=request)

        telemetry = Telemetry(_settings(), config_path=config_path, transport=httpx.MockTransport(fail))
        assert await telemetry.track("cmd_review") is False

    @pytest.mark.asyncio
    async def test_server_error_returns_false(self, config_path):
        transport = httpx.MockTransport(lambda r: httpx.Response(500))
        telemetry = Telemetry(_settings(), config_path=config_path, transport=transport)
        assert await telemetry.track("cmd_review") is False
