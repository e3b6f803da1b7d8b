"""Resolution options for did:web resolution."""

from enum import Enum
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, ValidationError

from social.graze.didweb.resolve.errors import DIDWebResolutionException


class DoHProvider(str, Enum):
    """DNS-over-HTTPS provider used to resolve the document host.

    `none` uses the ambient system resolver.
    """

    none = "none"
    cloudflare = "cloudflare"


class ResolutionOptions(BaseModel):
    """Options accepted by `resolve`.

    Unknown keys are rejected rather than ignored.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    doh: DoHProvider = DoHProvider.none


OptionsInput = Union[ResolutionOptions, Mapping[str, Any], None]


def parse_options(options: OptionsInput) -> ResolutionOptions:
    """Validate caller supplied options.

    Args:
        options: A ResolutionOptions, a mapping of option keys, or None for defaults

    Returns:
        Validated ResolutionOptions

    Raises:
        DIDWebResolutionException: options_error for unknown keys or values
    """
    if options is None:
        return ResolutionOptions()
    if isinstance(options, ResolutionOptions):
        return options
    if not isinstance(options, Mapping):
        raise DIDWebResolutionException.invalid_options(
            f"expected a mapping, got {type(options).__name__}"
        )
    try:
        return ResolutionOptions.model_validate(dict(options))
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(loc) for loc in error['loc']) or 'options'}: {error['msg']}"
            for error in e.errors()
        )
        raise DIDWebResolutionException.invalid_options(problems) from e
