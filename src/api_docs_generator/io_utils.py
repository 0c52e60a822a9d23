"""Input/output helpers."""

from __future__ import annotations

from pathlib import Path

import frontmatter

from api_docs_generator.output_directory import OutputDirectory


TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


def load_template(name: str) -> frontmatter.Post:
    path = TEMPLATES_DIR / name
    if not path.exists():
        raise FileNotFoundError(f"Template not found: {name} (searched: {TEMPLATES_DIR})")
    return frontmatter.loads(path.read_text(encoding="utf-8"))


def write_text(name: str, content: str, out_dir: OutputDirectory) -> Path:
    """Write UTF-8 text to name inside out_dir, replacing any existing file. Returns the written path."""
    out = out_dir.resolve(name)
    out.write_text(content, encoding="utf-8")
    return out
