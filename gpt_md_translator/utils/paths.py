"""Path helpers for input/output files."""

from pathlib import Path


def default_output_path(input_path: str | Path) -> Path:
    """Place the output next to the input with a .translated marker: docs/a.md -> docs/a.translated.md."""
    path = Path(input_path)
    return path.with_name(f"{path.stem}.translated{path.suffix}")
