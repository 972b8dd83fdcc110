"""OpenAI chat completions translation call."""

from typing import Any

from openai import AsyncOpenAI, OpenAIError

from gpt_md_translator.config.logging import get_logger, log_extra
from gpt_md_translator.config.settings import Settings
from gpt_md_translator.services.translation.base import BaseTranslationCall, CallError
from gpt_md_translator.services.translation.models import UsageRecord

logger = get_logger(__name__)


class OpenAITranslationCall(BaseTranslationCall):
    """
    Chat Completions API. Sends the system prompt and the Markdown body as two messages.
    API key is required unless a ready client is given.
    """

    def __init__(
        self,
        api_key: str = "",
        base_url: str | None = None,
        client: AsyncOpenAI | None = None,
    ):
        if client is None:
            if not api_key:
                raise ValueError("OpenAI API key is required (set openai_token in the config file or GPTMDT_OPENAI_TOKEN)")
            client = AsyncOpenAI(api_key=api_key, base_url=base_url)
        self._client = client

    @classmethod
    def from_settings(cls, settings: Settings) -> "OpenAITranslationCall":
        return cls(api_key=settings.openai_token, base_url=settings.openai_base_url)

    @property
    def provider_name(self) -> str:
        return "openai"

    async def aclose(self) -> None:
        await self._client.close()

    async def translate(self, system_prompt: str, body: str, model_id: str) -> tuple[str, UsageRecord | None]:
        try:
            response = await self._client.chat.completions.create(
                model=model_id,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": body},
                ],
            )
        except OpenAIError as e:
            logger.warning(
                "Chat completion request failed",
                **log_extra({"model": model_id, "error_type": type(e).__name__}),
            )
            raise CallError(f"Chat completion request failed: {e}", cause=e) from e

        if not response.choices:
            raise CallError("Received an empty response")

        parts: list[str] = []
        for choice in response.choices:
            if choice.finish_reason != "stop":
                raise CallError(f"Received an unacceptable finish reason: {choice.finish_reason!r}")
            content = choice.message.content
            if not content:
                raise CallError("Received an empty response")
            parts.append(f"{content}\n")

        return "".join(parts), _usage_from_response(response.usage)


def _usage_from_response(usage: Any) -> UsageRecord | None:
    if usage is None:
        return None
    return UsageRecord(
        prompt_tokens=usage.prompt_tokens,
        completion_tokens=usage.completion_tokens,
        total_tokens=usage.total_tokens,
    )
