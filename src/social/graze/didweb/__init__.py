"""
did:web Resolver

Resolves decentralized identifiers of the "web" method into DID documents
retrieved over HTTPS, checking that the retrieved document declares the
requested identifier.

Key Components:
- resolve: The resolution pipeline, its stages and the CLI
- model: Resolution options
- app: Configuration and process setup for the CLI

Usage:
    from social.graze.didweb.resolve.did import resolve

    document = await resolve("did:web:example.com", {"doh": "cloudflare"})
"""
