"""
Base URL resolution and response decoding.

Deployments of the backend differ in two ways: where the service lives when
no server is given, and whether the server wraps its responses in an
``{"Ok": ...}`` / ``{"Err": ...}`` envelope or signals errors through the HTTP
status code. Both are chosen by configuration.
"""

import logging
from typing import Any, Optional

from ..config import ConfigManager, get_config
from ..models.results import Err, Ok, Result, TodoAppErrorCode

URL_CONVENTIONS = ("api", "static")
DECODE_STRATEGIES = ("envelope", "status")

STATIC_PUBLIC_SUFFIX = "public/"


def resolve_base_url(override: Optional[str] = None, config: Optional[ConfigManager] = None) -> str:
    """
    Get the base URL requests are sent to.

    Args:
        override: Explicit server URL for this call; returned unchanged
        config: Configuration to read the default from (defaults to the global config)

    Returns:
        The base URL

    Raises:
        ValueError: If the configured URL convention is unknown
    """
    if override is not None:
        return override

    config = config or get_config()
    convention = config.url_convention

    if convention == "api":
        return config.api_url + config.service_prefix
    if convention == "static":
        return config.static_url + STATIC_PUBLIC_SUFFIX

    raise ValueError(f"Unknown URL convention: {convention!r} (expected one of {URL_CONVENTIONS})")


def join_url(base: str, path: str) -> str:
    """Join an operation path onto a base URL with exactly one slash."""
    return base.rstrip("/") + "/" + path.lstrip("/")


def decode_envelope(status_code: int, payload: Any, strategy: str = "envelope") -> Result:
    """
    Turn a decoded HTTP response into a result.

    Args:
        status_code: HTTP status of the response
        payload: The JSON decoded body
        strategy: "envelope" when the server wraps the body itself,
            "status" when the status code tells success from failure

    Returns:
        Ok with the body, or Err with the error code

    Raises:
        ValueError: If the strategy is unknown
    """
    if strategy == "envelope":
        if isinstance(payload, dict) and len(payload) == 1:
            if "Ok" in payload:
                return Ok(payload["Ok"])
            if "Err" in payload:
                return Err(TodoAppErrorCode.parse(payload["Err"]))

        logging.warning(f"Response with status {status_code} is not an Ok/Err envelope")
        return Err(TodoAppErrorCode.UNKNOWN)

    if strategy == "status":
        if 200 <= status_code < 300:
            return Ok(payload)

        code = TodoAppErrorCode.parse(payload)
        if code is TodoAppErrorCode.UNKNOWN:
            logging.warning(f"Unrecognized error payload with status {status_code}: {payload!r}")
        return Err(code)

    raise ValueError(f"Unknown decode strategy: {strategy!r} (expected one of {DECODE_STRATEGIES})")
