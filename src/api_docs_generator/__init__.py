"""Public package exports."""

from api_docs_generator.errors import ConnectivityError
from api_docs_generator.errors import DocsGeneratorError
from api_docs_generator.errors import ParseError
from api_docs_generator.models import GeneratedArtifacts
from api_docs_generator.models import GeneratorConfig
from api_docs_generator.models import ViewerSpec
from api_docs_generator.orchestrator import Orchestrator
from api_docs_generator.spec_fetcher import fetch_spec

__all__ = [
    "ConnectivityError",
    "DocsGeneratorError",
    "GeneratedArtifacts",
    "GeneratorConfig",
    "Orchestrator",
    "ParseError",
    "ViewerSpec",
    "fetch_spec",
]
