"""GPT MD Translator CLI - translate a Markdown file while preserving its formatting.

Usage:
    gpt-md-translator -i README.md
    gpt-md-translator -c Settings.toml -i docs/guide.md -o docs/guide.it.md

Settings come from the TOML config file and GPTMDT_* environment variables
(e.g. GPTMDT_GPT_MODEL, GPTMDT_OPENAI_TOKEN, GPTMDT_IGNORE_LIST="Foo,Bar").
"""

import argparse
import asyncio
import sys
from pathlib import Path

from pydantic import ValidationError

from gpt_md_translator import __version__
from gpt_md_translator.config.logging import configure_logging, get_logger
from gpt_md_translator.config.settings import DEFAULT_CONFIG_PATH, Settings, load_settings
from gpt_md_translator.services.chunking.tokenizer import CountingError, get_token_counter
from gpt_md_translator.services.translation.base import CallError
from gpt_md_translator.services.translation.models import UsageRecord
from gpt_md_translator.services.translation.pipeline import translate_document
from gpt_md_translator.services.translation.prompt import DEFAULT_SYS_PROMPT_BASE, build_system_prompt
from gpt_md_translator.services.translation.strategies import get_translation_call
from gpt_md_translator.utils.paths import default_output_path

logger = get_logger(__name__)

DEFAULT_INPUT_PATH = "./input.md"


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the CLI argument parser.

    Returns:
        Configured ArgumentParser for testing and main().
    """
    parser = argparse.ArgumentParser(
        prog="gpt-md-translator",
        description="Use AI to translate your text while preserving the Markdown formatting",
        epilog="Copyright 2023 (C) Riccardo Sacchetto - GNU GPLv3.0",
    )
    parser.add_argument(
        "--config",
        "-c",
        default=DEFAULT_CONFIG_PATH,
        help=f'Path to the config file (optional: defaults to "{DEFAULT_CONFIG_PATH}")',
    )
    parser.add_argument(
        "--input",
        "-i",
        default=DEFAULT_INPUT_PATH,
        help="Path to the file with the content to translate",
    )
    parser.add_argument(
        "--output",
        "-o",
        default=None,
        help='Path to the destination file (optional: defaults to "[inputfile].translated.md")',
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def resolve_system_prompt(settings: Settings) -> str:
    """Return the configured or default base prompt, extended with the ignore list."""
    if settings.sys_prompt:
        logger.info("Default overridden: using `%s` as the system prompt", settings.sys_prompt)
        base = settings.sys_prompt
    else:
        base = DEFAULT_SYS_PROMPT_BASE
    return build_system_prompt(base, settings.ignore_list, settings.gpt_model)


def report_usage(usage: UsageRecord | None) -> None:
    """Log the token usage of the run."""
    if usage is None:
        logger.warning("No usage info received.")
        return
    logger.info("Actual usage (due to chunking and/or overhead):")
    logger.info("|- Prompt: %d", usage.prompt_tokens)
    logger.info("|- Response: %d", usage.completion_tokens)
    logger.info("|- Total: %d", usage.total_tokens)


async def run_translation(args: argparse.Namespace, settings: Settings) -> int:
    """Translate args.input into the output file. Returns the process exit code."""
    system_prompt = resolve_system_prompt(settings)
    input_path = Path(args.input)
    output_path = Path(args.output) if args.output else default_output_path(input_path)
    logger.info("You are about to translate the content of `%s`.", input_path)
    logger.info("The output will be saved to `%s`", output_path)

    try:
        text = input_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Cannot read input file `%s`: %s", input_path, e)
        return 1

    try:
        translation_call = get_translation_call(settings.translation_provider, settings)
    except ValueError as e:
        logger.error("Translation failed: %s", e)
        return 1

    try:
        output_text, usage = await translate_document(
            document_text=text,
            system_prompt=system_prompt,
            model_id=settings.gpt_model,
            count_tokens=get_token_counter(settings.encoding),
            translation_call=translation_call,
            config=settings.chunking_config(),
        )
    except (CountingError, CallError) as e:
        logger.error("Translation failed: %s", e)
        return 1
    finally:
        await translation_call.aclose()

    report_usage(usage)

    logger.debug("Saving result...")
    try:
        output_path.write_text(output_text, encoding="utf-8")
    except OSError as e:
        logger.error("Cannot write output file `%s`: %s", output_path, e)
        return 1

    logger.info("Operation succeeded! Have a nice day.")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    print("=== Welcome to GPT MD Translator! ===")

    try:
        settings = load_settings(args.config)
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    configure_logging(settings)
    return asyncio.run(run_translation(args, settings))


if __name__ == "__main__":
    sys.exit(main())
