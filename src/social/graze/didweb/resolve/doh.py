"""DNS-over-HTTPS resolution and connection pinning.

Resolving the document host through a DoH provider keeps the hostname away
from the ambient DNS resolver. The resulting address is handed to aiohttp
through PinnedResolver so the connection goes to that address while SNI and
the Host header still carry the hostname from the request URL.
"""

import asyncio
import logging
import socket
from typing import List, Optional

from aiohttp import ClientError, ClientSession, hdrs
from aiohttp.abc import AbstractResolver, ResolveResult
from aiohttp.resolver import DefaultResolver

from social.graze.didweb.resolve.document import decode_json
from social.graze.didweb.resolve.errors import DIDWebResolutionException

logger = logging.getLogger(__name__)

CLOUDFLARE_DOH_ENDPOINT = "https://cloudflare-dns.com/dns-query"
DNS_JSON_CONTENT_TYPE = "application/dns-json"
DNS_TYPE_A = 1


async def resolve_ip(
    session: ClientSession, host: str, endpoint: str = CLOUDFLARE_DOH_ENDPOINT
) -> str:
    """Resolve a hostname to an IPv4 address using a JSON DoH endpoint.

    Args:
        session: HTTP client session
        host: Hostname to resolve
        endpoint: DoH JSON API endpoint

    Returns:
        The data of the first A record in the answer

    Raises:
        DIDWebResolutionException: dns_error for a failed query or missing A
            record, http_error for transport failures, json_error for a body
            that is not a JSON object
    """
    try:
        async with session.get(
            endpoint,
            params={"name": host},
            headers={hdrs.ACCEPT: DNS_JSON_CONTENT_TYPE},
        ) as resp:
            if resp.status != 200:
                raise DIDWebResolutionException.dns_status(host, resp.status)
            body = await resp.read()
    except (ClientError, asyncio.TimeoutError) as e:
        raise DIDWebResolutionException.http_transport(
            endpoint, str(e) or type(e).__name__
        ) from e

    answer = decode_json(body).get("Answer")
    if not isinstance(answer, list):
        raise DIDWebResolutionException.dns_no_answer(host)

    record = next(filter(a_record_predicate, answer), None)
    if record is None:
        raise DIDWebResolutionException.dns_no_a_record(host)

    logger.debug("DoH resolved %s to %s", host, record["data"])
    return record["data"]


def a_record_predicate(value) -> bool:
    """Check if a DoH answer entry is an A record with an address."""
    return (
        isinstance(value, dict)
        and value.get("type") == DNS_TYPE_A
        and isinstance(value.get("data"), str)
    )


class PinnedResolver(AbstractResolver):
    """aiohttp resolver that answers one hostname with a fixed address.

    Other hostnames, such as redirect targets on another host, are passed to
    aiohttp's default resolver.
    """

    def __init__(self, host: str, ip: str):
        self.host = host.lower()
        self.ip = ip
        self._fallback: Optional[AbstractResolver] = None

    async def resolve(
        self, host: str, port: int = 0, family: socket.AddressFamily = socket.AF_INET
    ) -> List[ResolveResult]:
        if host.lower() != self.host:
            if self._fallback is None:
                self._fallback = DefaultResolver()
            return await self._fallback.resolve(host, port, family)

        return [
            ResolveResult(
                hostname=host,
                host=self.ip,
                port=port,
                family=socket.AF_INET,
                proto=0,
                flags=socket.AI_NUMERICHOST | socket.AI_NUMERICSERV,
            )
        ]

    async def close(self) -> None:
        if self._fallback is not None:
            await self._fallback.close()
            self._fallback = None
