"""System prompt construction."""

from gpt_md_translator.config.logging import get_logger, log_extra

logger = get_logger(__name__)

DEFAULT_SYS_PROMPT_BASE = (
    "You shall translate the following markdown to Italian, "
    "preserving the existing formatting and avoiding any other output."
)


def format_ignore_list(terms: list[str]) -> str:
    """Quote and comma-join terms: ["a", "b"] -> '"a", "b"'."""
    return ", ".join(f'"{term}"' for term in terms)


def build_system_prompt(base: str, ignore_list: list[str], model_id: str) -> str:
    """
    Append a "Do not translate ..." clause for the ignore list to the base prompt.
    An empty list returns base unchanged.
    """
    if not ignore_list:
        return base
    terms = format_ignore_list(ignore_list)
    logger.info("Loaded the following ignore list: %s", terms)
    if not model_id.startswith("gpt-4"):
        logger.warning(
            "An ignore list is loaded but the selected model is older than gpt-4; it may not be honoured",
            **log_extra({"model": model_id}),
        )
    return f"{base} Do not translate {terms}."
