"""Tests for the chat model client wrapper."""

from types import SimpleNamespace

import pytest
from langchain_core.messages import HumanMessage, SystemMessage
from langchain_openai import ChatOpenAI

from wilson.chat.llm import FALLBACK_REPLY, ModelCallError, generate_reply, get_llm


class FakeLLM:
    """Records the messages it gets and returns a canned reply."""

    def __init__(self, content="Use IPMVP Option C.", error=None):
        self.content = content
        self.error = error
        self.calls = []

    async def ainvoke(self, messages):
        self.calls.append(messages)
        if self.error:
            raise self.error
        return SimpleNamespace(content=self.content)


@pytest.fixture(autouse=True)
def disable_tracing(monkeypatch):
    import wilson.tracing as tracing

    monkeypatch.setenv("WEAVE_DISABLED", "1")
    monkeypatch.setattr(tracing, "_init_attempted", False)
    monkeypatch.setattr(tracing, "_enabled", False)
    yield


@pytest.fixture
def mock_settings() -> SimpleNamespace:
    return SimpleNamespace(
        openai_api_base="http://localhost:9999/v1",
        openai_api_key="test-key",
        openai_model="test-model",
        chat_temperature=0.2,
        chat_max_tokens=256,
        chat_timeout_seconds=5.0,
    )


class TestGetLLM:
    def test_builds_chat_openai(self, mock_settings):
        llm = get_llm(mock_settings)
        assert isinstance(llm, ChatOpenAI)
        assert llm.model_name == "test-model"
        assert llm.temperature == 0.2


class TestGenerateReply:
    @pytest.mark.asyncio
    async def test_sends_system_then_user_message(self):
        llm = FakeLLM()
        reply = await generate_reply(llm, "SYSTEM", "What is a baseline?")

        assert reply == "Use IPMVP Option C."
        (messages,) = llm.calls
        assert isinstance(messages[0], SystemMessage)
        assert messages[0].content == "SYSTEM"
        assert isinstance(messages[1], HumanMessage)
        assert messages[1].content == "What is a baseline?"

    @pytest.mark.asyncio
    async def test_reply_is_stripped(self):
        reply = await generate_reply(FakeLLM(content="  hello \n"), "S", "hi")
        assert reply == "hello"

    @pytest.mark.asyncio
    async def test_empty_reply_uses_fallback(self):
        reply = await generate_reply(FakeLLM(content=""), "S", "hi")
        assert reply == FALLBACK_REPLY

    @pytest.mark.asyncio
    async def test_content_blocks_joined(self):
        llm = FakeLLM(content=[{"type": "text", "text": "Part one. "}, {"type": "text", "text": "Part two."}])
        reply = await generate_reply(llm, "S", "hi")
        assert reply == "Part one. Part two."

    @pytest.mark.asyncio
    async def test_provider_failure_wrapped(self):
        llm = FakeLLM(error=RuntimeError("connection refused"))
        with pytest.raises(ModelCallError, match="connection refused"):
            await generate_reply(llm, "S", "hi")
