"""
Translation pipeline: document → single call or paragraph chunks → sequential translation
calls → ordered concatenation + summed usage. Performs no file or console I/O.
"""

from gpt_md_translator.config.chunking.models import ChunkingConfig
from gpt_md_translator.config.logging import get_logger, log_extra
from gpt_md_translator.services.chunking.chunker import md_chunk
from gpt_md_translator.services.chunking.tokenizer import TokenCounter
from gpt_md_translator.services.translation.base import BaseTranslationCall
from gpt_md_translator.services.translation.models import UsageRecord

logger = get_logger(__name__)


async def translate_document(
    document_text: str,
    system_prompt: str,
    model_id: str,
    count_tokens: TokenCounter,
    translation_call: BaseTranslationCall,
    config: ChunkingConfig | None = None,
) -> tuple[str, UsageRecord | None]:
    """
    Translate document_text, chunking it by paragraph when it does not fit in one request.

    Returns (translated_text, usage). In the single-call path usage is whatever the call
    reported (possibly None); in the chunked path it is the field-wise sum over all calls.
    Chunks are translated one at a time in document order. Any CountingError or CallError
    propagates and no partial text is returned.
    """
    config = config or ChunkingConfig()
    sys_prompt_tokens = count_tokens(system_prompt) + config.message_overhead
    text_tokens = count_tokens(document_text) + config.message_overhead
    total_tokens = sys_prompt_tokens + text_tokens
    logger.info(
        "Computed prompt tokens: %d + %d = %d",
        sys_prompt_tokens,
        text_tokens,
        total_tokens,
    )

    if total_tokens <= config.hard_request_limit:
        logger.debug("Translating text in a single request")
        return await translation_call.translate(system_prompt, document_text, model_id)

    logger.warning(
        "The input is too big (%d tokens with prompt). It will be chunked.",
        total_tokens,
    )
    out_parts: list[str] = []
    usage_total = UsageRecord()
    chunks = md_chunk(document_text, count_tokens, sys_prompt_tokens, config)
    for chunk_num, chunk in enumerate(chunks):
        logger.debug("Translating chunk #%d", chunk_num, **log_extra({"chars": len(chunk)}))
        translated, usage = await translation_call.translate(system_prompt, chunk, model_id)
        if not translated.endswith("\n"):
            translated = f"{translated}\n"
        out_parts.append(translated)
        if usage is not None:
            usage_total = usage_total + usage

    logger.info("Translated %d chunks", len(out_parts))
    return "".join(out_parts), usage_total
