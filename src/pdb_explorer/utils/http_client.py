"""HTTP client utilities for RCSB API requests."""

import logging
from typing import Any

import httpx

from pdb_explorer.core.errors import (
    NetworkUnreachable,
    PDBLookupError,
    RemoteServiceError,
)
from pdb_explorer.utils.constants import (
    DEFAULT_TIMEOUT,
    JSON_FORMAT,
    TEXT_FORMAT,
    USER_AGENT,
)

logger = logging.getLogger(__name__)


async def fetch(
    url: str,
    headers: dict[str, str] | None = None,
    timeout: float = DEFAULT_TIMEOUT,
    accept_format: str = JSON_FORMAT,
) -> Any:
    """Make an HTTP GET request and decode the body.

    Args:
        url: The URL to request
        headers: Optional custom headers
        timeout: Request timeout in seconds
        accept_format: Accept header format; ``text/plain`` returns the raw text

    Returns:
        Decoded JSON, or the response text for ``text/plain``

    Raises:
        NetworkUnreachable: No HTTP response was obtained
        RemoteServiceError: Non-2xx status, or a body that is not valid JSON
    """
    default_headers = {"User-Agent": USER_AGENT, "Accept": accept_format}

    if headers:
        default_headers.update(headers)

    logger.debug("GET %s (Accept: %s)", url, default_headers["Accept"])
    try:
        async with httpx.AsyncClient() as client:
            response = await client.get(
                url, headers=default_headers, timeout=timeout, follow_redirects=True
            )
    except httpx.RequestError as e:
        raise NetworkUnreachable(url, str(e) or type(e).__name__) from e

    if not response.is_success:
        raise RemoteServiceError(response.status_code, url)

    if accept_format == TEXT_FORMAT:
        return response.text

    try:
        return response.json()
    except ValueError as e:
        raise RemoteServiceError(response.status_code, url, "invalid JSON body") from e


async def make_api_request(
    url: str,
    headers: dict[str, str] | None = None,
    timeout: float = DEFAULT_TIMEOUT,
    accept_format: str = JSON_FORMAT,
) -> dict[str, Any] | str | None:
    """Make an HTTP request, returning None instead of raising.

    Args:
        url: The URL to request
        headers: Optional custom headers
        timeout: Request timeout in seconds
        accept_format: Accept header format

    Returns:
        Response data (text or JSON object) or None if failed
    """
    try:
        data = await fetch(
            url, headers=headers, timeout=timeout, accept_format=accept_format
        )
    except PDBLookupError as e:
        logger.debug("Request to %s failed: %s", url, e)
        return None

    if accept_format == TEXT_FORMAT or isinstance(data, dict):
        return data
    return None


async def make_fasta_request(url: str, timeout: float = DEFAULT_TIMEOUT) -> str | None:
    """Make a request specifically for FASTA data.

    Args:
        url: The URL to request FASTA data from
        timeout: Request timeout in seconds

    Returns:
        FASTA text or None if failed
    """
    result = await make_api_request(url, timeout=timeout, accept_format=TEXT_FORMAT)
    return result if isinstance(result, str) else None
