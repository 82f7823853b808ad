"""Environment-based configuration for the Govee OpenAPI client."""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING, Any

from .api import GoveeClient, GoveeConfigurationError
from .const import ENV_API_KEY

if TYPE_CHECKING:
    from collections.abc import Mapping

_LOGGER = logging.getLogger(__name__)


def api_key_from_env(environ: Mapping[str, str] | None = None) -> str:
    """Read the Govee API key from the environment.

    Args:
        environ: Mapping to read from. Defaults to ``os.environ``.

    Returns:
        The API key with surrounding whitespace removed.

    Raises:
        GoveeConfigurationError: If the variable is missing or empty.

    """
    if environ is None:
        environ = os.environ

    api_key = environ.get(ENV_API_KEY, "").strip()
    if not api_key:
        error_msg = f"Missing {ENV_API_KEY} environment variable"
        raise GoveeConfigurationError(error_msg)

    _LOGGER.debug("Loaded Govee API key from %s", ENV_API_KEY)
    return api_key


def client_from_env(
    environ: Mapping[str, str] | None = None, **kwargs: Any
) -> GoveeClient:
    """Create a client configured from the environment.

    Args:
        environ: Mapping to read from. Defaults to ``os.environ``.
        **kwargs: Passed through to ``GoveeClient``.

    Raises:
        GoveeConfigurationError: If the API key variable is missing or empty.

    """
    return GoveeClient(api_key_from_env(environ), **kwargs)
