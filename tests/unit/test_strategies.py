"""Tests for the translation call registry and the mock call."""

import pytest

from gpt_md_translator.config.settings import Settings
from gpt_md_translator.services.translation.models import UsageRecord
from gpt_md_translator.services.translation import strategies
from gpt_md_translator.services.translation.strategies import get_translation_call
from gpt_md_translator.services.translation.strategies.mock_strategy import MockTranslationCall
from gpt_md_translator.services.translation.strategies.openai_strategy import OpenAITranslationCall


@pytest.fixture
def settings() -> Settings:
    return Settings(gpt_model="gpt-4", openai_token="sk-test")


class TestGetTranslationCall:
    """Tests for get_translation_call."""

    def test_openai(self, settings):
        assert isinstance(get_translation_call("openai", settings), OpenAITranslationCall)

    def test_mock(self, settings):
        assert isinstance(get_translation_call("mock", settings), MockTranslationCall)

    def test_unknown_provider(self, settings):
        with pytest.raises(ValueError, match="Unknown translation provider"):
            get_translation_call("deepl", settings)

    def test_builds_through_from_settings(self, settings, monkeypatch):
        """Every registered class is built by its own from_settings."""
        built = []

        class CustomCall(MockTranslationCall):
            @classmethod
            def from_settings(cls, settings):
                built.append(settings)
                return cls()

        monkeypatch.setitem(strategies.STRATEGY_REGISTRY, "custom", CustomCall)

        call = get_translation_call("custom", settings)

        assert isinstance(call, CustomCall)
        assert built == [settings]

    def test_openai_without_token(self):
        """The OpenAI call refuses to start without a key."""
        with pytest.raises(ValueError):
            get_translation_call("openai", Settings(gpt_model="gpt-4"))


class TestMockTranslationCall:
    """Tests for MockTranslationCall."""

    @pytest.mark.asyncio
    async def test_echoes_body(self):
        """The body comes back newline-terminated with word-count usage."""
        call = MockTranslationCall()

        text, usage = await call.translate("Translate it", "Hello big world", "gpt-4")

        assert text == "Hello big world\n"
        assert usage == UsageRecord(prompt_tokens=5, completion_tokens=3, total_tokens=8)
        assert call.calls == [("Translate it", "Hello big world", "gpt-4")]

    @pytest.mark.asyncio
    async def test_aclose_is_noop(self):
        """The mock call holds no resources to release."""
        assert await MockTranslationCall().aclose() is None
