"""Tests for tracing and event log helpers."""

import json

import pytest

import wilson.tracing as tracing
from wilson.event_log import alog_event, log_event


@pytest.fixture(autouse=True)
def reset_tracing(monkeypatch):
    monkeypatch.setenv("WEAVE_DISABLED", "1")
    monkeypatch.setattr(tracing, "_init_attempted", False)
    monkeypatch.setattr(tracing, "_enabled", False)
    yield


class TestTracing:
    @pytest.mark.asyncio
    async def test_disabled_calls_through(self):
        async def add(a, b=0):
            return a + b

        assert await tracing.trace_call_async("llm.test", add, 1, b=2, trace_meta={"x": 1}) == 3
        assert tracing._enabled is False

    @pytest.mark.asyncio
    async def test_errors_propagate(self):
        async def boom():
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            await tracing.trace_call_async("llm.test", boom)


class TestEventLog:
    def test_disabled_by_default(self, monkeypatch, tmp_path):
        path = tmp_path / "events.jsonl"
        monkeypatch.delenv("CHAT_EVENT_LOGS_ENABLED", raising=False)
        monkeypatch.setenv("CHAT_EVENT_LOG_PATH", str(path))

        log_event("chat.request", {"role": "student"})
        assert not path.exists()

    def test_appends_json_lines(self, monkeypatch, tmp_path):
        path = tmp_path / "nested" / "events.jsonl"
        monkeypatch.setenv("CHAT_EVENT_LOGS_ENABLED", "true")
        monkeypatch.setenv("CHAT_EVENT_LOG_PATH", str(path))

        log_event("chat.request", {"language": "中文"})
        log_event("chat.complete")

        records = [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]
        assert [r["event"] for r in records] == ["chat.request", "chat.complete"]
        assert records[0]["language"] == "中文"
        assert "ts" in records[1]

    @pytest.mark.asyncio
    async def test_async_variant_writes_from_worker_thread(self, monkeypatch, tmp_path):
        path = tmp_path / "events.jsonl"
        monkeypatch.setenv("CHAT_EVENT_LOGS_ENABLED", "1")
        monkeypatch.setenv("CHAT_EVENT_LOG_PATH", str(path))

        await alog_event("chat.error", {"error": "boom"})

        record = json.loads(path.read_text(encoding="utf-8"))
        assert record["event"] == "chat.error"
        assert record["error"] == "boom"

    @pytest.mark.asyncio
    async def test_async_variant_disabled(self, monkeypatch, tmp_path):
        path = tmp_path / "events.jsonl"
        monkeypatch.delenv("CHAT_EVENT_LOGS_ENABLED", raising=False)
        monkeypatch.setenv("CHAT_EVENT_LOG_PATH", str(path))

        await alog_event("chat.request")
        assert not path.exists()
