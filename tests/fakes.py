"""Stand-in for the Gemini chat model so no test touches the network."""

from __future__ import annotations

import asyncio
from typing import Callable, List, Optional

from langchain_core.messages import AIMessage


class RecordingChatModel:
    """Fake chat model that records every prompt it receives."""

    def __init__(
        self,
        reply: str = "Test response",
        error: Optional[Exception] = None,
        respond: Optional[Callable[[str], object]] = None,
        delay: Callable[[str], float] = lambda prompt: 0.0,
    ) -> None:
        self.reply = reply
        self.error = error
        self.respond = respond
        self.delay = delay
        self.prompts: List[str] = []
        self.completed: List[str] = []

    @property
    def calls(self) -> int:
        return len(self.prompts)

    async def ainvoke(self, prompt: str):
        self.prompts.append(prompt)
        pause = self.delay(prompt)
        if pause:
            await asyncio.sleep(pause)
        self.completed.append(prompt)
        if self.error is not None:
            raise self.error
        if self.respond is not None:
            return self.respond(prompt)
        return AIMessage(content=self.reply)
