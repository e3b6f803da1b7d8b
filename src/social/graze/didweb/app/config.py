"""
Configuration Module for the did:web resolver CLI

Settings are loaded from environment variables through Pydantic's
BaseSettings, with defaults suitable for interactive use. The library entry
point `resolve` never reads the environment; the CLI builds Settings and
passes the relevant values through.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings

from social.graze.didweb.model.options import DoHProvider
from social.graze.didweb.resolve.did import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT


class Settings(BaseSettings):
    """
    Settings for the did:web resolver CLI.

    Environment variables are mapped to fields by name, case insensitively.
    For example, HTTP_TIMEOUT=2.5 sets http_timeout.
    """

    debug: bool = False
    """
    Enable debug logging.
    Set with DEBUG=true environment variable.
    """

    doh: DoHProvider = DoHProvider.none
    """
    DNS-over-HTTPS provider used when --doh is not given.
    Set with DOH environment variable.
    """

    http_timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    """
    Total timeout in seconds for each outbound request.
    Set with HTTP_TIMEOUT environment variable.
    Default: 10.0
    """

    user_agent: str = DEFAULT_USER_AGENT
    """
    User-Agent header sent with outbound requests.
    Set with USER_AGENT environment variable.
    """

    sentry_dsn: Optional[str] = None
    """
    Sentry DSN for error reporting. Optional, no error reporting if not set.
    Set with SENTRY_DSN environment variable.
    """
