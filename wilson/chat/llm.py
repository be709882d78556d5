"""Model client for the chat service (any OpenAI-compatible endpoint via LangChain)."""

import logging
from typing import Any

from langchain_core.messages import HumanMessage, SystemMessage
from langchain_openai import ChatOpenAI

from wilson.tracing import trace_call_async

logger = logging.getLogger(__name__)

FALLBACK_REPLY = "I'm here to help!"


class ModelCallError(Exception):
    """Raised when the model provider call fails."""


def get_llm(settings: Any) -> ChatOpenAI:
    """Chat model configured from settings. Same client for every persona."""
    return ChatOpenAI(
        base_url=settings.openai_api_base,
        api_key=settings.openai_api_key or None,
        model=settings.openai_model,
        temperature=settings.chat_temperature,
        max_tokens=settings.chat_max_tokens,
        timeout=settings.chat_timeout_seconds,
    )


def _content_text(response: Any) -> str:
    content = response.content if hasattr(response, "content") else response
    if isinstance(content, list):
        # Content blocks: keep the text parts only
        parts = [
            block.get("text", "") if isinstance(block, dict) else str(block)
            for block in content
        ]
        content = "".join(parts)
    return str(content or "")


async def generate_reply(llm: Any, system_prompt: str, user_message: str) -> str:
    """Send one system + user turn to the model and return the reply text.

    Raises:
        ModelCallError: If the provider call fails
    """
    messages = [
        SystemMessage(content=system_prompt),
        HumanMessage(content=user_message),
    ]
    try:
        response = await trace_call_async(
            "llm.chat",
            llm.ainvoke,
            messages,
            trace_meta={
                "system_prompt_chars": len(system_prompt),
                "message_chars": len(user_message),
            },
        )
    except Exception as e:
        logger.error(f"Model call failed: {e}")
        raise ModelCallError(str(e)) from e

    text = _content_text(response).strip()
    return text or FALLBACK_REPLY
