"""Output directory preparation and artifact path resolution."""

from __future__ import annotations

import logging
from pathlib import Path


logger = logging.getLogger(__name__)


class OutputDirectory:
    def __init__(self, root: Path) -> None:
        self._root = root

    @property
    def root(self) -> Path:
        return self._root

    def ensure(self) -> Path:
        if not self._root.is_dir():
            self._root.mkdir(parents=True, exist_ok=True)
            logger.info("Created output directory: %s", self._root)
        return self._root

    def resolve(self, name: str) -> Path:
        """Return the path of artifact name inside the output directory."""
        target = self._root / name
        resolved = target.expanduser().resolve(strict=False)
        root_resolved = self._root.expanduser().resolve(strict=False)
        if not resolved.is_relative_to(root_resolved) or resolved == root_resolved:
            raise PermissionError(f"Artifact {name!r} escapes output directory {root_resolved}.")
        return target
