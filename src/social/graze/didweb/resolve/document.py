"""DID document retrieval, decoding and validation."""

import asyncio
import json
import logging
from typing import Any, Dict

from aiohttp import ClientError, ClientSession
from yarl import URL

from social.graze.didweb.resolve.errors import DIDWebResolutionException

logger = logging.getLogger(__name__)


async def fetch_document(session: ClientSession, url: URL) -> bytes:
    """Fetch the raw body of a DID document.

    Redirects are followed. When the session's connector carries a
    PinnedResolver, the connection goes to the pinned address while TLS and
    the Host header keep using the URL's hostname.

    Args:
        session: HTTP client session
        url: Document URL, usually from resolve_url

    Returns:
        Response body bytes

    Raises:
        DIDWebResolutionException: http_error on non-200 status or transport failure
    """
    try:
        async with session.get(url, allow_redirects=True) as resp:
            logger.debug("GET %s returned %s", url, resp.status)
            if resp.status != 200:
                raise DIDWebResolutionException.http_status(url, resp.status)
            return await resp.read()
    except (ClientError, asyncio.TimeoutError) as e:
        raise DIDWebResolutionException.http_transport(
            url, str(e) or type(e).__name__
        ) from e


def decode_json(body: bytes) -> Dict[str, Any]:
    """Decode a response body into a JSON object.

    Raises:
        DIDWebResolutionException: json_error if the body is not a JSON object
    """
    try:
        value = json.loads(body)
    except (UnicodeDecodeError, ValueError) as e:
        raise DIDWebResolutionException.invalid_json(str(e)) from e
    if not isinstance(value, dict):
        raise DIDWebResolutionException.invalid_json(
            f"expected a JSON object, got {type(value).__name__}"
        )
    return value


def validate_document(did: str, document: Dict[str, Any]) -> Dict[str, Any]:
    """Check that a DID document declares the requested DID as its id.

    The comparison is exact string equality without normalization.

    Raises:
        DIDWebResolutionException: validation_error on a missing or different id
    """
    found = document.get("id")
    if not isinstance(found, str) or found != did:
        raise DIDWebResolutionException.id_mismatch(found, did)
    return document
