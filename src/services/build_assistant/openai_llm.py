"""OpenAI ChatCompletion client wrapper."""

from typing import Any, Dict, List, Optional, cast

from openai import OpenAI

from configs import settings
from src.services.build_assistant.base_llm import BaseLLM

OPEN_ROUTER_URL = "https://openrouter.ai/api/v1"
OPEN_ROUTER_MODEL = "deepseek/deepseek-chat-v3.1:free"


class OpenAILLM(BaseLLM):
    """Wrapper around the OpenAI client exposing a complete method."""

    def __init__(
        self,
        model: Optional[str] = None,
        api_key: Optional[str] = None,
        use_open_router: Optional[bool] = None,
    ) -> None:
        """Initialize with model name and API key from settings by default."""
        self.model = model or settings.OPENAI_MODEL
        self._api_key = api_key or settings.OPENAI_API_KEY
        self.use_open_router = (
            settings.USE_OPEN_ROUTER if use_open_router is None else use_open_router
        )
        if self.use_open_router:
            self.model = OPEN_ROUTER_MODEL
        self._client: Optional[OpenAI] = None

    @property
    def client(self) -> OpenAI:
        # Built on first use so a missing key surfaces as a failed completion.
        if self._client is None:
            if self.use_open_router:
                self._client = OpenAI(api_key=self._api_key, base_url=OPEN_ROUTER_URL)
            else:
                self._client = OpenAI(api_key=self._api_key)
        return self._client

    def complete(self, messages: List[Dict[str, str]]) -> str:
        """Call chat completions and return the reply content."""
        response = self.client.chat.completions.create(
            model=self.model,
            messages=cast(Any, messages),
        )
        return response.choices[0].message.content or ""
