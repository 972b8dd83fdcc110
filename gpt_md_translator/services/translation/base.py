"""Base translation call and its error contract."""

from abc import ABC, abstractmethod

from gpt_md_translator.config.settings import Settings
from gpt_md_translator.services.translation.models import UsageRecord


class CallError(Exception):
    """Raised when a translation call fails, is truncated, or returns no content."""

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message)
        self.cause = cause


class BaseTranslationCall(ABC):
    """
    One request/response exchange with a chat model. Implementations must raise CallError
    for transport failures, any finish reason other than a natural stop, and empty content.
    """

    @classmethod
    @abstractmethod
    def from_settings(cls, settings: Settings) -> "BaseTranslationCall":
        """Build the call from application settings."""
        ...

    @abstractmethod
    async def translate(self, system_prompt: str, body: str, model_id: str) -> tuple[str, UsageRecord | None]:
        """
        Translate body under system_prompt with model_id.
        Returns the translated text (each returned choice newline-terminated) and usage, if reported.
        """
        ...

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Provider identifier, e.g. 'openai', 'mock'."""
        ...

    async def aclose(self) -> None:
        """Release network resources. Nothing to release by default."""
        return None
