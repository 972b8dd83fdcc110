"""Translation result models."""

from pydantic import BaseModel, Field


class UsageRecord(BaseModel):
    """Token usage reported by one translation call, or summed over several."""

    prompt_tokens: int = Field(default=0, ge=0)
    completion_tokens: int = Field(default=0, ge=0)
    total_tokens: int = Field(default=0, ge=0)

    def __add__(self, other: "UsageRecord") -> "UsageRecord":
        if not isinstance(other, UsageRecord):
            return NotImplemented
        return UsageRecord(
            prompt_tokens=self.prompt_tokens + other.prompt_tokens,
            completion_tokens=self.completion_tokens + other.completion_tokens,
            total_tokens=self.total_tokens + other.total_tokens,
        )
