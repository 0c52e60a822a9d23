"""Model types for generator configuration and results."""

from api_docs_generator.models.generated_artifacts import GeneratedArtifacts
from api_docs_generator.models.generator_config import GeneratorConfig
from api_docs_generator.models.viewer_spec import ViewerSpec

__all__ = [
    "GeneratedArtifacts",
    "GeneratorConfig",
    "ViewerSpec",
]
