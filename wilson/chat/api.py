"""FastAPI chat service for Wilson.

Endpoints:
  POST /api/chat      → Answer a question for a role/region/language persona
  GET  /api/chat      → Health and service info
  GET  /api/personas  → Selectable roles, regions and languages with labels
  POST /api/prompt    → Preview the composed system prompt (no model call)
"""

import logging
import time
import uuid
from datetime import datetime, timezone
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from wilson.event_log import alog_event
from wilson.persona import PersonaSelection, compose_for, list_options, resolve_profile

from .config import Settings, get_settings
from .llm import ModelCallError, generate_reply, get_llm
from .normalize import normalize_selection

logger = logging.getLogger(__name__)

SERVICE_NAME = "Wilson M&V Chat Service"
SERVICE_VERSION = "0.1.0"


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message, "timestamp": _now()})


class PersonaFields(BaseModel):
    """Role/region/language labels, either display names or canonical keys."""

    model_config = ConfigDict(populate_by_name=True)

    role: str | None = Field(default=None, validation_alias=AliasChoices("role", "persona"))
    region: str | None = None
    language: str | None = None


class ChatRequest(PersonaFields):
    """Request body for POST /api/chat."""

    message: str = ""
    context: str | None = None
    session_id: str | None = Field(
        default=None,
        validation_alias=AliasChoices("sessionId", "session_id"),
    )


class PersonaInfo(BaseModel):
    """Resolved persona echoed back to the caller."""

    role: str
    region: str
    language: str
    role_name: str = Field(serialization_alias="roleName")
    region_name: str = Field(serialization_alias="regionName")
    language_name: str = Field(serialization_alias="languageName")

    @classmethod
    def from_selection(cls, selection: PersonaSelection) -> "PersonaInfo":
        """Describe the profiles the prompt was actually built from, defaults included."""
        role = resolve_profile("role", selection.role)
        region = resolve_profile("region", selection.region)
        language = resolve_profile("language", selection.language)
        return cls(
            role=role.key,
            region=region.key,
            language=language.key,
            role_name=role.display_name,
            region_name=region.display_name,
            language_name=language.display_name,
        )


class ChatResponse(BaseModel):
    """Response for POST /api/chat."""

    response: str
    session_id: str = Field(serialization_alias="sessionId")
    timestamp: str
    persona: PersonaInfo


class PromptResponse(BaseModel):
    """Response for POST /api/prompt."""

    system_prompt: str = Field(serialization_alias="systemPrompt")
    persona: PersonaInfo


def new_session_id() -> str:
    return f"session_{uuid.uuid4().hex}"


def build_user_message(message: str, context: str | None) -> str:
    """User turn sent to the model, with optional caller context in front."""
    message = message.strip()
    if context and context.strip():
        return f"Context: {context.strip()}\n\n{message}"
    return message


class ChatService:
    """HTTP front end: normalizes persona labels, composes the prompt, calls the model."""

    def __init__(self, settings: Settings, llm: Any = None) -> None:
        """Initialize the chat service.

        Args:
            settings: Application settings
            llm: Optional chat model; built from settings on first use if omitted
        """
        self.settings = settings
        self._llm = llm
        self.app = self._create_app()

    @property
    def llm(self) -> Any:
        if self._llm is None:
            self._llm = get_llm(self.settings)
        return self._llm

    def _create_app(self) -> FastAPI:
        """Create and configure the FastAPI application."""
        app = FastAPI(
            title=SERVICE_NAME,
            description="Persona-aware Measurement and Verification assistant",
            version=SERVICE_VERSION,
        )

        app.add_middleware(
            CORSMiddleware,
            allow_origins=self.settings.cors_origins_list or ["*"],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

        @app.exception_handler(RequestValidationError)
        async def validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
            logger.warning("Invalid request to %s: %s", request.url.path, exc.errors())
            return _error(422, "Invalid request body")

        self._register_routes(app)
        return app

    def _register_routes(self, app: FastAPI) -> None:
        """Register all API routes."""

        @app.get("/api/chat")
        async def chat_info() -> dict[str, Any]:
            """Health check and API info."""
            return {
                "status": "active",
                "service": SERVICE_NAME,
                "version": SERVICE_VERSION,
                "model": self.settings.openai_model,
                "endpoints": {
                    "chat": "/api/chat",
                    "personas": "/api/personas",
                    "prompt": "/api/prompt",
                },
                "timestamp": _now(),
            }

        @app.get("/api/personas")
        async def personas() -> dict[str, Any]:
            """Selectable roles, regions and languages."""
            return list_options()

        @app.post("/api/prompt", response_model=PromptResponse)
        async def preview_prompt(request: PersonaFields) -> PromptResponse:
            """Return the system prompt a chat request with these labels would use."""
            selection = normalize_selection(request.role, request.region, request.language)
            return PromptResponse(
                system_prompt=compose_for(selection),
                persona=PersonaInfo.from_selection(selection),
            )

        @app.post("/api/chat", response_model=ChatResponse)
        async def chat(request: ChatRequest) -> ChatResponse | JSONResponse:
            """Answer one question using the persona's system prompt."""
            if not request.message.strip():
                return _error(400, "message is required")

            session_id = request.session_id or new_session_id()
            selection = normalize_selection(request.role, request.region, request.language)
            logger.info(
                f"Chat request {session_id}: role={selection.role!r} "
                f"region={selection.region!r} language={selection.language!r}"
            )
            await alog_event(
                "chat.request",
                {
                    "session_id": session_id,
                    "role": selection.role,
                    "region": selection.region,
                    "language": selection.language,
                    "message_chars": len(request.message),
                },
            )

            started = time.time()
            try:
                reply = await generate_reply(
                    self.llm,
                    compose_for(selection),
                    build_user_message(request.message, request.context),
                )
            except ModelCallError as e:
                await alog_event("chat.error", {"session_id": session_id, "error": str(e)})
                return _error(502, "Failed to get response from model")
            except Exception as e:
                logger.exception(f"Chat handler error: {e}")
                await alog_event("chat.error", {"session_id": session_id, "error": str(e)})
                return _error(500, "Internal error")

            response_ms = int((time.time() - started) * 1000)
            await alog_event(
                "chat.complete",
                {
                    "session_id": session_id,
                    "response_time_ms": response_ms,
                    "response_chars": len(reply),
                },
            )
            return ChatResponse(
                response=reply,
                session_id=session_id,
                timestamp=_now(),
                persona=PersonaInfo.from_selection(selection),
            )


def create_app(settings: Settings | None = None, llm: Any = None) -> FastAPI:
    """Create the chat service and return its FastAPI app.

    Args:
        settings: Application settings (read from environment if omitted)
        llm: Optional chat model, mainly for tests

    Returns:
        FastAPI app
    """
    service = ChatService(settings or get_settings(), llm)
    return service.app
