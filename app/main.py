from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import uvicorn
from fastapi import Body, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from agent.relay import ChatRelay, RelayFailure
from app.supervisor import install_error_hooks
from config.settings import Settings, get_settings


logging.basicConfig(
    level=get_settings().log_level,
    format="[%(asctime)s] %(levelname)s - %(message)s",
)
logger = logging.getLogger("portfolio_relay")

MESSAGE_REQUIRED = "Message is required"
UPSTREAM_FAILED = "Failed to fetch response from AI"


class ChatRequest(BaseModel):
    message: Optional[str] = Field(None, description="User's question for the assistant")


def _log_configuration(settings: Settings) -> None:
    if not settings.gemini_api_key:
        logger.error("GEMINI_API_KEY is missing from environment or .env")
    else:
        logger.info("API key loaded: %s", settings.masked_api_key)
    logger.info("Config: env=%s model=%s", settings.app_env, settings.gemini_model)


def create_app(
    settings: Optional[Settings] = None,
    relay: Optional[ChatRelay] = None,
) -> FastAPI:
    settings = settings or get_settings()
    relay = relay or ChatRelay(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        install_error_hooks(asyncio.get_running_loop())
        _log_configuration(settings)
        yield

    app = FastAPI(title="Portfolio AI Chat Relay", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.relay = relay

    @app.middleware("http")
    async def catch_unhandled(request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            logger.exception("Unhandled error on %s %s", request.method, request.url.path)
            return JSONResponse(
                status_code=500,
                content={"error": "Internal server error", "details": str(exc)},
            )

    # Any origin may call the chat endpoint.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def invalid_request(request: Request, exc: RequestValidationError) -> JSONResponse:
        if any(err.get("type") == "json_invalid" for err in exc.errors()):
            return JSONResponse(status_code=400, content={"error": "Invalid JSON body"})
        return JSONResponse(status_code=400, content={"error": MESSAGE_REQUIRED})

    @app.post("/api/chat")
    async def chat(request: Request, req: Optional[ChatRequest] = Body(None)) -> JSONResponse:
        if req is None or not req.message:
            return JSONResponse(status_code=400, content={"error": MESSAGE_REQUIRED})

        logger.info("Incoming chat: message_len=%s", len(req.message))
        result = await request.app.state.relay.relay(req.message)

        if isinstance(result, RelayFailure):
            return JSONResponse(
                status_code=500,
                content={"error": UPSTREAM_FAILED, "details": result.details},
            )
        return JSONResponse(status_code=200, content={"reply": result.reply})

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app


app = create_app()


def run() -> None:
    settings = get_settings()
    logger.info("AI Server (Gemini) running at http://localhost:%s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
