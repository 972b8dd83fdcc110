"""
Paragraph chunker: splits a Markdown document on blank lines and greedily packs whole
paragraphs into chunks that fit the per-request token budget. Paragraphs are never split.
"""

from gpt_md_translator.config.chunking.models import ChunkingConfig
from gpt_md_translator.config.logging import get_logger, log_extra
from gpt_md_translator.services.chunking.tokenizer import TokenCounter

logger = get_logger(__name__)


class MarkdownChunker:
    """
    Lazy, single-pass iterator over chunks of a document.

    Each chunk is one or more consecutive paragraphs, each followed by the delimiter.
    A chunk is closed when adding the next paragraph would bring
    sys_prompt_tokens + chunk + paragraph (each with message overhead) to the budget.
    A paragraph that alone exceeds the budget becomes its own chunk.
    """

    def __init__(
        self,
        text: str,
        count_tokens: TokenCounter,
        sys_prompt_tokens: int,
        config: ChunkingConfig,
    ):
        self._count_tokens = count_tokens
        self._sys_prompt_tokens = sys_prompt_tokens
        self._delimiter = config.paragraph_delimiter
        self._overhead = config.message_overhead
        self._budget = config.chunk_budget
        self._paragraphs = text.split(self._delimiter)
        self._position = 0
        self._cache = ""

    def __iter__(self) -> "MarkdownChunker":
        return self

    def __next__(self) -> str:
        while self._position < len(self._paragraphs):
            next_par = self._paragraphs[self._position]
            if self._cache:
                cache_tokens = self._count_tokens(self._cache) + self._overhead
                next_par_tokens = self._count_tokens(next_par) + self._overhead
                if self._sys_prompt_tokens + cache_tokens + next_par_tokens >= self._budget:
                    return self._take_cache()
            # An empty cache always takes the next paragraph.
            self._cache = f"{self._cache}{next_par}{self._delimiter}"
            self._position += 1

        if self._cache:
            return self._take_cache()
        raise StopIteration

    def _take_cache(self) -> str:
        chunk = self._cache
        self._cache = ""
        logger.debug("Chunk ready", **log_extra({"chars": len(chunk), "next_paragraph": self._position}))
        return chunk


def md_chunk(
    text: str,
    count_tokens: TokenCounter,
    sys_prompt_tokens: int,
    config: ChunkingConfig | None = None,
) -> MarkdownChunker:
    """Return the chunk iterator for text. sys_prompt_tokens should already include its message overhead."""
    return MarkdownChunker(text, count_tokens, sys_prompt_tokens, config or ChunkingConfig())
