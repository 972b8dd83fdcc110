"""Translation call implementations."""

from gpt_md_translator.config.settings import Settings
from gpt_md_translator.services.translation.base import BaseTranslationCall
from gpt_md_translator.services.translation.strategies.mock_strategy import MockTranslationCall
from gpt_md_translator.services.translation.strategies.openai_strategy import OpenAITranslationCall

STRATEGY_REGISTRY: dict[str, type[BaseTranslationCall]] = {
    "openai": OpenAITranslationCall,
    "mock": MockTranslationCall,
}


def get_translation_call(provider: str, settings: Settings) -> BaseTranslationCall:
    """Return a translation call for the given provider name. Raises ValueError for unknown providers."""
    cls = STRATEGY_REGISTRY.get(provider)
    if cls is None:
        raise ValueError(f"Unknown translation provider: {provider!r}")
    return cls.from_settings(settings)
