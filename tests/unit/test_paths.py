"""Tests for path helpers."""

from pathlib import Path

from gpt_md_translator.utils.paths import default_output_path


class TestDefaultOutputPath:
    """Tests for default_output_path."""

    def test_markdown_file(self):
        assert default_output_path("docs/guide.md") == Path("docs/guide.translated.md")

    def test_default_input(self):
        assert default_output_path("./input.md") == Path("input.translated.md")

    def test_no_suffix(self):
        assert default_output_path("notes") == Path("notes.translated")

    def test_multiple_dots(self):
        """Only the last suffix is kept after the marker."""
        assert default_output_path("v1.2.md") == Path("v1.2.translated.md")
