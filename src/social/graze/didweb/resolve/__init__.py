"""
did:web Resolution

This package resolves did:web DIDs to their DID documents over HTTPS,
following the did:web method specification for the DID to URL mapping.

Key Components:
- url.py: DID to HTTPS URL mapping (pure, no I/O)
- doh.py: DNS-over-HTTPS lookup and the pinned connection resolver
- document.py: Document fetch, JSON decoding and id validation
- did.py: The resolution pipeline
- errors.py: ErrorKind and DIDWebResolutionException
- __main__.py: CLI interface for resolution

The resolution flow follows these steps:
1. Validate the resolution options
2. Map the DID to the document URL
3. Optionally resolve the host through DNS-over-HTTPS and pin the connection
4. Fetch the document, following redirects
5. Decode the body as a JSON object
6. Check that the document id equals the requested DID

Each step either succeeds or raises a DIDWebResolutionException tagged with
the step that failed. Nothing is cached between calls.
"""
