"""Factory functions for creating LLM providers."""

from shared.config import Settings

from .base import LLMProvider, ModelConfig
from .openai_compatible import OpenAICompatibleProvider


def get_provider(provider_type: str) -> LLMProvider:
    """Create the provider for a provider type.

    Raises:
        KeyError: If provider_type is not recognized
    """
    return OpenAICompatibleProvider(provider_type)


def parse_model_string(model: str) -> tuple[str, str]:
    """Parse 'provider/model_id' into (provider_type, model_id).

    A bare model id (no '/') is treated as an OpenAI model.

    Args:
        model: Model string, e.g. "gpt-4.1-nano" or "ollama/llama3"

    Returns:
        Tuple of (provider_type, model_id)
    """
    if "/" not in model:
        return "openai", model
    provider_type, model_id = model.split("/", 1)
    return provider_type, model_id


def model_config_from_settings(settings: Settings) -> ModelConfig:
    """Build the ModelConfig for the completion model configured in settings."""
    provider_type, model_id = parse_model_string(settings.ai_model)
    return ModelConfig(
        model_name=f"{provider_type}-{model_id}",
        provider_type=provider_type,
        model_id=model_id,
        api_base=settings.openai_base_url,
        api_key=settings.openai_api_key,
    )
