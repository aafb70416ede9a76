"""
Completion client for the suggestion gateway.

An explicitly constructed client, built once from settings by the service
container and injected into SuggestionService. Every call is single-shot
and non-streaming; there are no retries.
"""

import logging

from langchain_core.messages import HumanMessage, SystemMessage

from providers.base import LLMProvider, ModelConfig

from .exceptions import CompletionError

logger = logging.getLogger(__name__)


class CompletionClient:
    """Sends one system + user message pair and returns the reply text."""

    def __init__(self, provider: LLMProvider, config: ModelConfig) -> None:
        self._provider = provider
        self._config = config

    @property
    def model_name(self) -> str:
        return self._config.model_name

    async def complete(self, system_prompt: str, user_prompt: str, temperature: float) -> str:
        """
        Run a chat completion.

        Args:
            system_prompt: Instructions for the model
            user_prompt: The user's text
            temperature: Sampling temperature for this call

        Returns:
            The reply text, stripped

        Raises:
            CompletionError: If the call fails or the reply is empty
        """
        messages = [
            SystemMessage(content=system_prompt),
            HumanMessage(content=user_prompt),
        ]
        try:
            llm = self._provider.get_llm(self._config, temperature=temperature)
            response = await llm.ainvoke(messages)
        except Exception as e:
            logger.warning(f"Completion call to {self._config.model_name} failed: {e}")
            raise CompletionError(str(e), original_error=type(e).__name__) from e

        content = response.content if isinstance(response.content, str) else ""
        content = content.strip()
        if not content:
            raise CompletionError("empty response")
        return content
