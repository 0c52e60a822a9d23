"""Pydantic model for Swagger UI display options."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ViewerSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    dom_id: str = "#swagger-ui"
    deep_linking: bool = True
    # JS expressions resolved in the page, emitted unquoted.
    presets: tuple[str, ...] = ("SwaggerUIBundle.presets.apis", "SwaggerUIStandalonePreset")
    plugins: tuple[str, ...] = ("SwaggerUIBundle.plugins.DownloadUrl",)
    layout: str = "StandaloneLayout"
    try_it_out_enabled: bool = True
    bundle_url: str = Field(default="https://unpkg.com/swagger-ui-dist@5.9.0")
    auto_try_delay_ms: int = Field(default=1000, ge=0)
