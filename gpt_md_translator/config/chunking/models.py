"""Chunking configuration models. Read-only; no business logic."""

from pydantic import BaseModel, Field


class ChunkingConfig(BaseModel):
    """Token limits and paragraph delimiter used to size translation requests."""

    hard_request_limit: int = Field(default=4096, ge=1, description="Max prompt+response tokens per request")
    message_overhead: int = Field(default=4, ge=0, description="Framing tokens added per chat message")
    paragraph_delimiter: str = Field(default="\n\n", min_length=1)
    encoding: str = Field(default="cl100k_base", description="tiktoken encoding name")

    @property
    def chunk_budget(self) -> int:
        """Half of the hard limit; the other half is left for the translated response."""
        return self.hard_request_limit // 2
