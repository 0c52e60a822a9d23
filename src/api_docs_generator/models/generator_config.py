"""Pydantic model for the generator configuration."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from api_docs_generator.models.viewer_spec import ViewerSpec


class GeneratorConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    api_url: str = "http://localhost:8080"
    openapi_endpoint: str = "/v3/api-docs"
    output_dir: Path = Path("./docs")
    title: str = "API Documentation"
    description: str = "Interactive OpenAPI documentation rendered with Swagger UI"
    viewer: ViewerSpec = Field(default_factory=ViewerSpec)

    @property
    def spec_url(self) -> str:
        return f"{self.api_url}{self.openapi_endpoint}"
