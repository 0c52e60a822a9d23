"""CLI entrypoint."""

from __future__ import annotations

import logging

import anyio
import httpx

from api_docs_generator.errors import DocsGeneratorError
from api_docs_generator.models.generated_artifacts import GeneratedArtifacts
from api_docs_generator.models.generator_config import GeneratorConfig
from api_docs_generator.orchestrator import Orchestrator


logger = logging.getLogger(__name__)

SERVE_PORT = 8000


def print_summary(config: GeneratorConfig, artifacts: GeneratedArtifacts) -> None:
    print()
    print("Documentation generated.")
    print()
    print("Files:")
    for path in artifacts.paths():
        print(f"   - {path}")
    print()
    print("To view the documentation:")
    print("   1. Run in a terminal:")
    print(f"      cd {config.output_dir}")
    print(f"      python -m http.server {SERVE_PORT}")
    print(f"   2. Open http://localhost:{SERVE_PORT} in a browser")


def run(config: GeneratorConfig, *, client: httpx.AsyncClient | None = None) -> int:
    logger.info("Generating API documentation...")
    orch = Orchestrator(config, client=client)
    try:
        artifacts = anyio.run(orch.run)
    except DocsGeneratorError as exc:
        logger.error("Failed to fetch the OpenAPI spec: %s", exc)
        return 1
    except Exception as exc:
        logger.error("Error while generating documentation: %s", exc)
        return 1
    print_summary(config, artifacts)
    return 0


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    raise SystemExit(run(GeneratorConfig()))
