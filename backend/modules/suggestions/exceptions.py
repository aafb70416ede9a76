"""
Suggestions module exceptions.
"""

from shared.exceptions import ExternalServiceError, ValidationError


class CompletionError(ExternalServiceError):
    """Raised when the completion model call fails or returns nothing usable."""

    def __init__(self, message: str, original_error: str | None = None):
        super().__init__(
            f"Completion request failed: {message}",
            service="llm",
            code="COMPLETION_ERROR",
            details={"original_error": original_error},
        )


class SmartListGenerationError(ExternalServiceError):
    """Raised when a smart list cannot be produced from the model's reply."""

    def __init__(self, reason: str):
        super().__init__(
            "Erro ao gerar lista. Tente novamente.",
            service="llm",
            code="SMART_LIST_GENERATION_FAILED",
            details={"reason": reason},
        )


class InvalidSmartListError(ValidationError):
    """Raised when the model's list JSON lacks a title or an item array."""

    def __init__(self, reason: str):
        super().__init__(
            "Formato de resposta inválido",
            code="INVALID_SMART_LIST",
            details={"reason": reason},
        )
