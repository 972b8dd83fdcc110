"""Token counting for request sizing. Uses tiktoken (cl100k_base, the encoding of the OpenAI chat models)."""

from functools import lru_cache, partial
from typing import Callable

import tiktoken

from gpt_md_translator.config.logging import get_logger, log_extra

logger = get_logger(__name__)

DEFAULT_ENCODING = "cl100k_base"

# Framing tokens the chat API adds per message; tiktoken does not see them.
MESSAGE_OVERHEAD = 4

TokenCounter = Callable[[str], int]


class CountingError(Exception):
    """Raised when text cannot be tokenized or the encoding cannot be loaded."""

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message)
        self.cause = cause


@lru_cache
def get_encoding(encoding_name: str = DEFAULT_ENCODING) -> tiktoken.Encoding:
    """Load the tiktoken encoding once per process."""
    try:
        return tiktoken.get_encoding(encoding_name)
    except (ValueError, OSError) as e:
        logger.error(
            "Failed to load tokenizer encoding",
            **log_extra({"encoding": encoding_name, "error_type": type(e).__name__}),
        )
        raise CountingError(f"Cannot load encoding {encoding_name!r}", cause=e) from e


def count_tokens(text: str, encoding_name: str = DEFAULT_ENCODING) -> int:
    """Return the token count for text. Special tokens are counted as ordinary input."""
    if not text:
        return 0
    enc = get_encoding(encoding_name)
    try:
        return len(enc.encode(text, allowed_special="all"))
    except ValueError as e:
        raise CountingError("Cannot tokenize text", cause=e) from e


def get_token_counter(encoding_name: str = DEFAULT_ENCODING) -> TokenCounter:
    """Return a single-argument counter bound to encoding_name, as used by the chunker and pipeline."""
    return partial(count_tokens, encoding_name=encoding_name)
