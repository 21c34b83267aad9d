"""Base LLM interface used by the build assistant."""

from typing import Dict, List


class BaseLLM:
    """Abstract base class for chat-completion LLMs."""

    def complete(self, messages: List[Dict[str, str]]) -> str:
        """
        Generate a text reply from a chat-formatted message history.

        Args:
            messages (List[Dict[str, str]]): Messages in the format
                [{"role": "user"|"assistant"|"system", "content": "..."}].

        Returns:
            str: Text generated by the model for the assistant turn.
        """
        raise NotImplementedError
