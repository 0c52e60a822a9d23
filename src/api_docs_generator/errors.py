"""Error types raised while generating documentation."""

from __future__ import annotations


class DocsGeneratorError(Exception):
    def __init__(self, message: str, url: str) -> None:
        super().__init__(message)
        self.url = url


class ConnectivityError(DocsGeneratorError):
    """The configured service could not be reached."""


class ParseError(DocsGeneratorError):
    """The response body is not a JSON document."""
