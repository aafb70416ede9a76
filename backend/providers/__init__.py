"""LLM provider implementations."""

from .base import LLMProvider, ModelConfig
from .factory import get_provider, model_config_from_settings, parse_model_string

__all__ = [
    "LLMProvider",
    "ModelConfig",
    "get_provider",
    "model_config_from_settings",
    "parse_model_string",
]
