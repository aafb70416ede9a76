"""Base classes and models for LLM providers."""

from abc import ABC, abstractmethod

from langchain_openai import ChatOpenAI
from pydantic import BaseModel


class ModelConfig(BaseModel):
    """Configuration for the completion model.

    Attributes:
        model_name: Friendly alias (e.g., "openai-gpt-4.1-nano")
        provider_type: Provider key (e.g., "openai", "ollama")
        model_id: Model identifier sent to the API (e.g., "gpt-4.1-nano")
        api_base: Base URL for the API endpoint (empty for the provider default)
        api_key: API key (empty string for local servers)
    """

    model_config = {"frozen": True}

    model_name: str
    provider_type: str
    model_id: str
    api_base: str = ""
    api_key: str = ""


class LLMProvider(ABC):
    """Abstract base class for LLM providers.

    Every supported backend speaks the OpenAI chat-completions API, so
    implementations are thin wrappers around ChatOpenAI with
    provider-specific defaults.
    """

    @abstractmethod
    def get_llm(self, config: ModelConfig, temperature: float | None = None) -> ChatOpenAI:
        """Return a configured LLM client for the given model.

        Args:
            config: Model configuration with provider details
            temperature: Sampling temperature for this client; None keeps
                         the API default.

        Returns:
            A configured ChatOpenAI client
        """
        pass
