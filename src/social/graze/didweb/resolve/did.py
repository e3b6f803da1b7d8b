"""did:web resolution pipeline.

Sequences option validation, URL mapping, optional DNS-over-HTTPS
resolution, document fetch, JSON decoding and identifier validation. The
first failing stage raises a DIDWebResolutionException tagged with that
stage and the remaining stages are skipped.
"""

import logging
from typing import Any, Dict, Final, Optional

from aiohttp import ClientSession, ClientTimeout, TCPConnector, hdrs
from aiohttp.abc import AbstractResolver

from social.graze.didweb.model.options import DoHProvider, OptionsInput, parse_options
from social.graze.didweb.resolve.document import (
    decode_json,
    fetch_document,
    validate_document,
)
from social.graze.didweb.resolve.doh import (
    CLOUDFLARE_DOH_ENDPOINT,
    PinnedResolver,
    resolve_ip,
)
from social.graze.didweb.resolve.url import resolve_url

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT: Final = 10.0
DEFAULT_USER_AGENT: Final = "graze-didweb/0.1.0"

DOH_ENDPOINTS: Final = {
    DoHProvider.cloudflare: CLOUDFLARE_DOH_ENDPOINT,
}


def client_session(
    timeout: float = DEFAULT_TIMEOUT,
    user_agent: str = DEFAULT_USER_AGENT,
    resolver: Optional[AbstractResolver] = None,
) -> ClientSession:
    """Create a client session for a single resolution request.

    When a resolver is given the session gets its own connector using it.
    The session owns its connector and closes it on exit.
    """
    connector = TCPConnector(resolver=resolver) if resolver is not None else None
    return ClientSession(
        connector=connector,
        timeout=ClientTimeout(total=timeout),
        headers={hdrs.USER_AGENT: user_agent},
    )


async def resolve(
    did: str,
    options: OptionsInput = None,
    timeout: float = DEFAULT_TIMEOUT,
    user_agent: str = DEFAULT_USER_AGENT,
) -> Dict[str, Any]:
    """Resolve a did:web DID to its validated DID document.

    Args:
        did: did:web DID to resolve
        options: ResolutionOptions or a mapping such as {"doh": "cloudflare"}
        timeout: Total timeout in seconds for each outbound request
        user_agent: User-Agent header sent with each request

    Returns:
        The DID document, whose "id" equals `did`

    Raises:
        DIDWebResolutionException: tagged with the stage that failed
    """
    resolution_options = parse_options(options)
    url = resolve_url(did)

    resolver: Optional[PinnedResolver] = None
    if resolution_options.doh != DoHProvider.none:
        async with client_session(timeout, user_agent) as session:
            ip = await resolve_ip(
                session, url.raw_host, DOH_ENDPOINTS[resolution_options.doh]
            )
        # The connector resolves the IDNA encoded host, not the Unicode form.
        resolver = PinnedResolver(url.raw_host, ip)

    try:
        async with client_session(timeout, user_agent, resolver) as session:
            body = await fetch_document(session, url)
    finally:
        if resolver is not None:
            await resolver.close()

    document = validate_document(did, decode_json(body))
    logger.debug("Resolved %s from %s", did, url)
    return document
