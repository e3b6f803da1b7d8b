"""did:web to HTTPS URL mapping.

Implements the did:web method transformation: colons in the method specific
identifier become path separators, percent-encoded characters are decoded
(so `%3A` becomes the port separator), and the document name is appended.
"""

import logging
import re
from urllib.parse import unquote, urlsplit, urlunsplit

from yarl import URL

from social.graze.didweb.resolve.errors import DIDWebResolutionException

logger = logging.getLogger(__name__)

DID_WEB_PREFIX = "did:web:"
WELL_KNOWN_PATH = "/.well-known/did.json"
DOCUMENT_PATH = "/did.json"

INVALID_PERCENT_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def resolve_url(did: str) -> URL:
    """Map a did:web DID to the HTTPS URL of its DID document.

    Examples:
        did:web:example.com -> https://example.com/.well-known/did.json
        did:web:example.com%3A3000:some:path -> https://example.com:3000/some/path/did.json

    Args:
        did: did:web DID to map

    Returns:
        URL of the DID document

    Raises:
        DIDWebResolutionException: input_error if the DID is not a usable did:web
    """
    if not did.startswith(DID_WEB_PREFIX):
        raise DIDWebResolutionException.not_did_web()

    domain_path = did.removeprefix(DID_WEB_PREFIX).replace(":", "/")
    if INVALID_PERCENT_ESCAPE.search(domain_path):
        raise DIDWebResolutionException.invalid_url("https://" + domain_path)

    attempted = "https://" + unquote(domain_path)
    if "#" in attempted:
        raise DIDWebResolutionException.url_fragment()

    try:
        # Unbalanced brackets in the netloc and ports that are not a number
        # both raise ValueError.
        parts = urlsplit(attempted)
        parts.port
    except ValueError as e:
        raise DIDWebResolutionException.invalid_url(attempted) from e

    if not parts.hostname or "." not in parts.hostname:
        raise DIDWebResolutionException.invalid_url(attempted)

    if parts.path == "":
        path = WELL_KNOWN_PATH
    else:
        path = parts.path + DOCUMENT_PATH

    try:
        url = URL(urlunsplit(("https", parts.netloc, path, parts.query, "")))
    except ValueError as e:
        raise DIDWebResolutionException.invalid_url(attempted) from e

    logger.debug("Resolved %s to %s", did, url)
    return url
