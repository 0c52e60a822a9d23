"""Runs the fetch and write steps in order."""

from __future__ import annotations

import httpx

from api_docs_generator.artifacts import write_instructions, write_spec, write_viewer_page
from api_docs_generator.models.generated_artifacts import GeneratedArtifacts
from api_docs_generator.models.generator_config import GeneratorConfig
from api_docs_generator.output_directory import OutputDirectory
from api_docs_generator.spec_fetcher import fetch_spec


class Orchestrator:
    def __init__(
        self,
        config: GeneratorConfig,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.config: GeneratorConfig = config
        self.output_directory: OutputDirectory = OutputDirectory(config.output_dir)
        self._client: httpx.AsyncClient | None = client

    async def run(self) -> GeneratedArtifacts:
        # Nothing touches the filesystem until the fetch has succeeded.
        spec = await fetch_spec(self.config.spec_url, client=self._client)
        self.output_directory.ensure()
        spec_path = write_spec(spec, self.output_directory)
        viewer_path = write_viewer_page(self.config, self.output_directory)
        instructions_path = write_instructions(self.config, self.output_directory)
        return GeneratedArtifacts(
            spec_path=spec_path,
            viewer_path=viewer_path,
            instructions_path=instructions_path,
        )
