from typing import List
import argparse
import asyncio
import json
import logging
import sys

import sentry_sdk

from social.graze.didweb.app.cli import configure_logging, configure_sentry
from social.graze.didweb.app.config import Settings
from social.graze.didweb.model.options import DoHProvider, ResolutionOptions
from social.graze.didweb.resolve.did import resolve
from social.graze.didweb.resolve.errors import DIDWebResolutionException
from social.graze.didweb.resolve.url import resolve_url

logger = logging.getLogger(__name__)


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="didweb-resolve", description="Resolve did:web DIDs"
    )
    parser.add_argument("did", nargs="+", help="The DID(s) to resolve.")
    parser.add_argument(
        "--doh",
        choices=[provider.value for provider in DoHProvider],
        default=settings.doh.value,
        help="Resolve the document host with DNS-over-HTTPS.",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=settings.http_timeout,
        help="Total timeout in seconds for each request.",
    )
    parser.add_argument(
        "--url-only",
        action="store_true",
        help="Print the document URL without fetching it.",
    )
    return parser


async def realMain(argv: List[str] | None = None) -> int:
    settings = Settings()
    configure_logging(settings)
    configure_sentry(settings)

    args = build_parser(settings).parse_args(argv)
    options = ResolutionOptions(doh=DoHProvider(args.doh))

    failures = 0
    for did in args.did:
        try:
            if args.url_only:
                print(resolve_url(did))
                continue
            document = await resolve(
                did, options, timeout=args.timeout, user_agent=settings.user_agent
            )
            print(json.dumps(document, indent=2))
        except DIDWebResolutionException as e:
            failures += 1
            logger.error("Failed to resolve %s: %s: %s", did, e.kind.value, e.message)
            sentry_sdk.capture_exception(e)

    return 1 if failures else 0


def main() -> None:
    sys.exit(asyncio.run(realMain()))


if __name__ == "__main__":
    main()
