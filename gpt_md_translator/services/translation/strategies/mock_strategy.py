"""Mock translation call for dry runs and tests. Echoes the body back unchanged."""

from gpt_md_translator.config.settings import Settings
from gpt_md_translator.services.translation.base import BaseTranslationCall
from gpt_md_translator.services.translation.models import UsageRecord


def _word_count(text: str) -> int:
    return len(text.split())


class MockTranslationCall(BaseTranslationCall):
    """
    Deterministic offline call: the "translation" is the body itself, newline-terminated.
    Usage is reported in whitespace-separated words.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[str, str, str]] = []

    @classmethod
    def from_settings(cls, settings: Settings) -> "MockTranslationCall":
        return cls()

    @property
    def provider_name(self) -> str:
        return "mock"

    async def translate(self, system_prompt: str, body: str, model_id: str) -> tuple[str, UsageRecord | None]:
        self.calls.append((system_prompt, body, model_id))
        prompt_tokens = _word_count(system_prompt) + _word_count(body)
        completion_tokens = _word_count(body)
        usage = UsageRecord(
            prompt_tokens=prompt_tokens,
            completion_tokens=completion_tokens,
            total_tokens=prompt_tokens + completion_tokens,
        )
        return f"{body}\n", usage
