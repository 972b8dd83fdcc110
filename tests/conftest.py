"""Shared test fixtures for gpt_md_translator tests."""

import pytest

from gpt_md_translator.config.chunking.models import ChunkingConfig
from gpt_md_translator.services.translation.base import BaseTranslationCall, CallError
from gpt_md_translator.services.translation.models import UsageRecord


def word_counter(text: str) -> int:
    """Deterministic token counter: one token per whitespace-separated word."""
    return len(text.split())


class RecordingTranslationCall(BaseTranslationCall):
    """Fake call that upper-cases the body and replays scripted usage records."""

    def __init__(self, usages=None, fail_on_call=None, suffix="\n"):
        self.calls: list[tuple[str, str, str]] = []
        self._usages = list(usages or [])
        self._fail_on_call = fail_on_call
        self._suffix = suffix
        self.closed = False

    @classmethod
    def from_settings(cls, settings):
        return cls()

    @property
    def provider_name(self) -> str:
        return "recording"

    async def translate(self, system_prompt, body, model_id):
        self.calls.append((system_prompt, body, model_id))
        if self._fail_on_call is not None and len(self.calls) == self._fail_on_call:
            raise CallError("Received an unacceptable finish reason: 'length'")
        usage = self._usages.pop(0) if self._usages else None
        return body.upper() + self._suffix, usage

    async def aclose(self):
        self.closed = True


@pytest.fixture
def count_words():
    """Word-count token counter."""
    return word_counter


@pytest.fixture
def small_config() -> ChunkingConfig:
    """Config with a tiny budget: hard limit 40, chunk budget 20, no overhead."""
    return ChunkingConfig(hard_request_limit=40, message_overhead=0)


@pytest.fixture
def recording_call() -> RecordingTranslationCall:
    """Recording fake translation call with no usage."""
    return RecordingTranslationCall()


@pytest.fixture
def usage_factory():
    """Build UsageRecord from (prompt, completion, total)."""

    def _make(prompt: int, completion: int, total: int) -> UsageRecord:
        return UsageRecord(prompt_tokens=prompt, completion_tokens=completion, total_tokens=total)

    return _make


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Run each test in an empty directory with no GPTMDT_* variables set."""
    import os

    for key in list(os.environ):
        if key.upper().startswith("GPTMDT_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def restore_root_logger():
    """Undo configure_logging changes to the root logger."""
    import logging

    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
