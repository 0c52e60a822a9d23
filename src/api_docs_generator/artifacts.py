"""Renderers and writers for the generated documentation files."""

from __future__ import annotations

import html
import json
import logging
from pathlib import Path
from string import Template
from typing import Any

from api_docs_generator.io_utils import load_template, write_text
from api_docs_generator.models.generator_config import GeneratorConfig
from api_docs_generator.models.viewer_spec import ViewerSpec
from api_docs_generator.output_directory import OutputDirectory


logger = logging.getLogger(__name__)

SPEC_FILENAME = "api-docs.json"
VIEWER_TEMPLATE = "viewer_page.tmpl"
INSTRUCTIONS_TEMPLATE = "instructions.tmpl"

OPTIONS_INDENT = " " * 16


def render_spec(spec: Any) -> str:
    return json.dumps(spec, indent=2, ensure_ascii=False, allow_nan=False)


def _js_string(value: str) -> str:
    # Keep "</script>" inside a string literal from closing the script block.
    return json.dumps(value).replace("</", "<\\/")


def _js_expressions(names: tuple[str, ...]) -> str:
    if not names:
        return "[]"
    inner = f",\n{OPTIONS_INDENT}    ".join(names)
    return f"[\n{OPTIONS_INDENT}    {inner}\n{OPTIONS_INDENT}]"


def render_viewer_options(spec_url: str, viewer: ViewerSpec) -> str:
    """
    Render the SwaggerUIBundle options as object literal entries.
    Strings and booleans are JSON literals; presets and plugins are bare JS expressions.
    """
    entries: list[tuple[str, str]] = [
        ("url", _js_string(spec_url)),
        ("dom_id", _js_string(viewer.dom_id)),
        ("deepLinking", json.dumps(viewer.deep_linking)),
        ("presets", _js_expressions(viewer.presets)),
        ("plugins", _js_expressions(viewer.plugins)),
        ("layout", _js_string(viewer.layout)),
        ("tryItOutEnabled", json.dumps(viewer.try_it_out_enabled)),
    ]
    return ",\n".join(f"{OPTIONS_INDENT}{json.dumps(key)}: {value}" for key, value in entries)


def _render_template(name: str, **values: object) -> tuple[str, str]:
    """Return (output filename, rendered text) for a packaged template."""
    post = load_template(name)
    body = Template(post.content.strip()).substitute(**values)
    return str(post["output"]), body.rstrip() + "\n"


def render_viewer_page(config: GeneratorConfig) -> tuple[str, str]:
    viewer = config.viewer
    return _render_template(
        VIEWER_TEMPLATE,
        title=html.escape(config.title),
        description=html.escape(config.description),
        spec_url=html.escape(config.spec_url),
        bundle_url=html.escape(viewer.bundle_url.rstrip("/")),
        dom_element_id=html.escape(viewer.dom_id.lstrip("#")),
        viewer_options=render_viewer_options(config.spec_url, viewer),
        auto_try_delay_ms=viewer.auto_try_delay_ms,
    )


def render_instructions(config: GeneratorConfig) -> tuple[str, str]:
    return _render_template(
        INSTRUCTIONS_TEMPLATE,
        title=config.title,
        spec_url=config.spec_url,
        output_dir=config.output_dir.as_posix(),
    )


def write_spec(spec: Any, out_dir: OutputDirectory) -> Path:
    path = write_text(SPEC_FILENAME, render_spec(spec), out_dir)
    logger.info("Saved OpenAPI spec: %s", path)
    return path


def write_viewer_page(config: GeneratorConfig, out_dir: OutputDirectory) -> Path:
    filename, content = render_viewer_page(config)
    path = write_text(filename, content, out_dir)
    logger.info("Generated Swagger UI page (live spec from %s): %s", config.spec_url, path)
    return path


def write_instructions(config: GeneratorConfig, out_dir: OutputDirectory) -> Path:
    filename, content = render_instructions(config)
    path = write_text(filename, content, out_dir)
    logger.info("Generated README: %s", path)
    return path
