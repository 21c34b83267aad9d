"""Generate PC build suggestions through a chat-completion model."""

from __future__ import annotations

import logging
from typing import Optional

from src.services.build_assistant.base_llm import BaseLLM
from src.services.build_assistant.openai_llm import OpenAILLM
from src.services.build_assistant.prompt_loader import PromptLoader
from src.services.build_assistant.reply_parser import (
    BuildSuggestion,
    parse_build_reply,
)

logger = logging.getLogger("build_assistant.service")

PROMPT_NAME = "build"


class BuildAssistantError(RuntimeError):
    """Raised when the model call fails."""


def build_request_message(purpose: str, budget: float) -> str:
    """Phrase a budget and use case the way the prompt expects."""
    amount = int(budget) if float(budget).is_integer() else budget
    return f"Build a PC for {purpose} with a budget of {amount} BDT."


class BuildAssistantService:
    """Ask the LLM for a build and parse its reply."""

    def __init__(self, llm: BaseLLM, prompts: Optional[PromptLoader] = None) -> None:
        self.llm = llm
        self.prompts = prompts or PromptLoader()

    def suggest(self, message: str) -> BuildSuggestion:
        """Return the reply for a free-text build request."""
        logger.info("Build request: %s", message)
        prompt = self.prompts.get_template(PROMPT_NAME).format(message=message)
        messages = []
        system = self.prompts.get_system_prompt(PROMPT_NAME)
        if system:
            messages.append({"role": "system", "content": system})
        messages.append({"role": "user", "content": prompt})

        try:
            reply = self.llm.complete(messages)
        except Exception as exc:
            logger.error("LLM call failed: %s", exc)
            raise BuildAssistantError(str(exc) or "Error fetching from LLM API") from exc

        suggestion = parse_build_reply(reply)
        logger.info("Build reply parsed into %d parts", len(suggestion.parts))
        return suggestion


def get_build_assistant_service() -> BuildAssistantService:
    """FastAPI dependency wiring the service with the OpenAI client."""
    return BuildAssistantService(llm=OpenAILLM())
