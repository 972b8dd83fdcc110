"""Application settings from a TOML file and GPTMDT_* environment variables. Read-only; no business logic."""

from pathlib import Path
from typing import Annotated, Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import (
    BaseSettings,
    NoDecode,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from gpt_md_translator.config.chunking.models import ChunkingConfig

DEFAULT_CONFIG_PATH = "Settings.toml"


class Settings(BaseSettings):
    """Translator settings. Environment variables override the config file."""

    model_config = SettingsConfigDict(
        env_prefix="GPTMDT_",
        env_file=".env",
        env_file_encoding="utf-8",
        toml_file=DEFAULT_CONFIG_PATH,
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(default="INFO", description="Log level name")

    # Model and credentials
    gpt_model: str = Field(..., min_length=1, description="Chat model identifier, e.g. gpt-4")
    openai_token: str = Field(default="", description="OpenAI API key")
    openai_base_url: str | None = Field(default=None, description="Base URL for OpenAI-compatible endpoints")
    translation_provider: Literal["openai", "mock"] = Field(default="openai")

    # Prompt
    sys_prompt: str | None = Field(default=None, description="Replaces the default system prompt")
    ignore_list: Annotated[list[str], NoDecode] = Field(
        default_factory=list, description="Terms the model must leave untranslated"
    )

    # Token accounting
    encoding: str = Field(default="cl100k_base", description="tiktoken encoding name")
    hard_request_limit: int = Field(default=4096, ge=1)
    message_overhead: int = Field(default=4, ge=0)

    @field_validator("ignore_list", mode="before")
    @classmethod
    def _split_ignore_list(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [term.strip() for term in value.split(",") if term.strip()]
        return value

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            TomlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )

    def chunking_config(self) -> ChunkingConfig:
        """Return the chunking parameters derived from these settings."""
        return ChunkingConfig(
            hard_request_limit=self.hard_request_limit,
            message_overhead=self.message_overhead,
            encoding=self.encoding,
        )


def load_settings(config_path: str | Path = DEFAULT_CONFIG_PATH, **overrides: Any) -> Settings:
    """
    Build settings from the TOML file at config_path (optional; a missing file is skipped)
    overlaid with GPTMDT_* environment variables. Construct once at startup and pass it down.
    """

    class _FileSettings(Settings):
        model_config = SettingsConfigDict(toml_file=Path(config_path))

    return _FileSettings(**overrides)
