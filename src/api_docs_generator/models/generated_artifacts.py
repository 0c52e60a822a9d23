"""Pydantic model for the files produced by a run."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel


class GeneratedArtifacts(BaseModel):
    spec_path: Path
    viewer_path: Path
    instructions_path: Path

    def paths(self) -> list[Path]:
        # Listing order used in the console summary.
        return [self.viewer_path, self.spec_path, self.instructions_path]
