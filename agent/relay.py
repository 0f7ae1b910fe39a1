from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_google_genai import ChatGoogleGenerativeAI

from agent.core.prompt import SYSTEM_PROMPT, USER_QUESTION_SEPARATOR
from config.settings import Settings


logger = logging.getLogger("portfolio_relay.relay")


@dataclass(frozen=True)
class RelaySuccess:
    reply: str


@dataclass(frozen=True)
class RelayFailure:
    details: str


RelayResult = Union[RelaySuccess, RelayFailure]


def build_prompt(message: str) -> str:
    return f"{SYSTEM_PROMPT}{USER_QUESTION_SEPARATOR}{message}"


def build_llm(settings: Settings) -> ChatGoogleGenerativeAI:
    if not settings.gemini_api_key:
        raise RuntimeError(
            "GEMINI_API_KEY not set. Please configure it in environment or .env"
        )

    params: Dict[str, Any] = {
        "model": settings.gemini_model,
        "google_api_key": settings.gemini_api_key,
        # One attempt per request; failures go straight back to the caller.
        "max_retries": 0,
    }
    if settings.temperature is not None:
        params["temperature"] = settings.temperature
    if settings.top_p is not None:
        params["top_p"] = settings.top_p
    return ChatGoogleGenerativeAI(**params)


COMPLETED_FINISH_REASONS = {"STOP", "MAX_TOKENS", "FINISH_REASON_UNSPECIFIED"}


def _reason_name(value: Any) -> str:
    return str(getattr(value, "name", value) or "")


def _check_not_blocked(metadata: Dict[str, Any]) -> None:
    # A blocked prompt or candidate comes back as an empty message, not an error.
    feedback = metadata.get("prompt_feedback") or {}
    block_reason = feedback.get("block_reason") if isinstance(feedback, dict) else None
    if block_reason and _reason_name(block_reason) != "BLOCK_REASON_UNSPECIFIED":
        raise ValueError(f"Prompt was blocked by the model: {_reason_name(block_reason)}")

    finish_reason = _reason_name(metadata.get("finish_reason"))
    if finish_reason and finish_reason not in COMPLETED_FINISH_REASONS:
        raise ValueError(f"Model stopped without a reply: {finish_reason}")


def extract_text(message: Any) -> str:
    """Pull the plain reply text out of a chat model response.

    Gemini returns either a string or a list of content parts; only the text
    parts are kept, joined in order. Blocked prompts and candidates stopped for
    safety, recitation or similar reasons raise ``ValueError``.
    """
    metadata = getattr(message, "response_metadata", None)
    if isinstance(metadata, dict):
        _check_not_blocked(metadata)

    content = getattr(message, "content", message)
    if isinstance(content, str):
        return content

    if isinstance(content, list):
        parts = []
        for part in content:
            if isinstance(part, str):
                parts.append(part)
            elif isinstance(part, dict) and part.get("type") == "text":
                parts.append(part.get("text") or "")
        if parts:
            return "".join(parts)

    raise ValueError(
        f"Model response contained no text (content type: {type(content).__name__})"
    )


class ChatRelay:
    """Forwards one user message to the model and reports the outcome."""

    def __init__(self, settings: Settings, llm: Optional[BaseChatModel] = None) -> None:
        self.settings = settings
        self._llm = llm

    def _model(self) -> BaseChatModel:
        if self._llm is None:
            self._llm = build_llm(self.settings)
        return self._llm

    async def relay(self, message: str) -> RelayResult:
        try:
            llm = self._model()
            result = await llm.ainvoke(build_prompt(message))
            reply = extract_text(result)
        except Exception as exc:
            logger.exception("Gemini call failed: %r", exc)
            return RelayFailure(details=str(exc))

        logger.info("Model responded with %s chars", len(reply))
        return RelaySuccess(reply=reply)
