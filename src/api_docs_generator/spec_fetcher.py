"""Fetch the OpenAPI document from a running service."""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx

from api_docs_generator.errors import ConnectivityError, ParseError


logger = logging.getLogger(__name__)

SUPPORTED_SCHEMES = ("http", "https")


async def fetch_spec(url: str, *, client: httpx.AsyncClient | None = None) -> Any:
    """
    Issue a single GET against url and parse the full body as JSON.
    Any status code is accepted as long as the body parses.
    """
    logger.info("Fetching OpenAPI spec: %s", url)
    _check_scheme(url)
    try:
        if client is None:
            async with httpx.AsyncClient() as owned_client:
                response = await owned_client.get(url)
        else:
            response = await client.get(url)
    except httpx.TransportError as exc:
        _log_remediation(url)
        raise ConnectivityError(f"HTTP request failed: {exc}", url) from exc

    try:
        spec = json.loads(response.text, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as exc:
        _log_remediation(url)
        raise ParseError(f"JSON parse error: {exc}", url) from exc

    logger.info("Fetched OpenAPI spec")
    return spec


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are not JSON.
    raise ValueError(f"Invalid JSON constant {name!r}")


def _check_scheme(url: str) -> None:
    try:
        scheme = httpx.URL(url).scheme
    except httpx.InvalidURL as exc:
        _log_remediation(url)
        raise ConnectivityError(f"Invalid URL: {exc}", url) from exc
    if scheme not in SUPPORTED_SCHEMES:
        _log_remediation(url)
        raise ConnectivityError(f"Unsupported URL scheme {scheme!r}; expected http or https.", url)


def _log_remediation(url: str) -> None:
    logger.error("Could not fetch the OpenAPI spec from %s", url)
    logger.info("Things to check:")
    logger.info("1. The service is running")
    logger.info("2. It is listening on the host and port in %s", url)
    logger.info("3. The service exposes its OpenAPI document at that path")
