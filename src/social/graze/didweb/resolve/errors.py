"""did:web resolution errors.

Every failure in the resolution pipeline is raised as a single
DIDWebResolutionException tagged with the ErrorKind of the stage that
produced it.
"""

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Stage that produced a resolution failure."""

    options_error = "options_error"
    input_error = "input_error"
    dns_error = "dns_error"
    http_error = "http_error"
    json_error = "json_error"
    validation_error = "validation_error"


class DIDWebResolutionException(Exception):
    """
    Exception raised for did:web resolution failures.

    Instances carry the `kind` of the failing stage and a human readable
    message. Use the static methods to create specific failures.
    """

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}"

    def __repr__(self) -> str:
        return f"DIDWebResolutionException({self.kind.value!r}, {self.message!r})"

    @staticmethod
    def invalid_options(msg: str) -> "DIDWebResolutionException":
        """Resolution options contain unknown keys or values."""
        return DIDWebResolutionException(
            ErrorKind.options_error, f"Invalid resolution options: {msg}"
        )

    @staticmethod
    def not_did_web() -> "DIDWebResolutionException":
        """The DID does not use the web method."""
        return DIDWebResolutionException(
            ErrorKind.input_error, "DID does not start with 'did:web:'"
        )

    @staticmethod
    def url_fragment() -> "DIDWebResolutionException":
        return DIDWebResolutionException(
            ErrorKind.input_error, "URL contains a fragment"
        )

    @staticmethod
    def invalid_url(url: str) -> "DIDWebResolutionException":
        return DIDWebResolutionException(
            ErrorKind.input_error, f"Not a valid URL: {url}"
        )

    @staticmethod
    def dns_status(host: str, status: int) -> "DIDWebResolutionException":
        """The DoH endpoint answered with a non-200 status."""
        return DIDWebResolutionException(
            ErrorKind.dns_error,
            f"DNS query for {host} failed with status code {status}",
        )

    @staticmethod
    def dns_no_answer(host: str) -> "DIDWebResolutionException":
        return DIDWebResolutionException(
            ErrorKind.dns_error, f"No Answer field in DNS response for {host}"
        )

    @staticmethod
    def dns_no_a_record(host: str) -> "DIDWebResolutionException":
        return DIDWebResolutionException(
            ErrorKind.dns_error, f"No A record found in DNS response for {host}"
        )

    @staticmethod
    def http_status(url: Any, status: int) -> "DIDWebResolutionException":
        """A request completed with a status other than 200."""
        return DIDWebResolutionException(
            ErrorKind.http_error, f"Request to {url} failed with status code {status}"
        )

    @staticmethod
    def http_transport(url: Any, msg: str) -> "DIDWebResolutionException":
        """A request could not be completed."""
        return DIDWebResolutionException(
            ErrorKind.http_error, f"Request to {url} failed: {msg}"
        )

    @staticmethod
    def invalid_json(msg: str) -> "DIDWebResolutionException":
        return DIDWebResolutionException(
            ErrorKind.json_error, f"Response is not valid JSON: {msg}"
        )

    @staticmethod
    def id_mismatch(found: Any, expected: str) -> "DIDWebResolutionException":
        """The document declares an identifier other than the requested DID."""
        return DIDWebResolutionException(
            ErrorKind.validation_error,
            f"DID document id {found!r} does not match expected {expected!r}",
        )
