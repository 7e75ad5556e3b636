"""Opt-in tracing of PRIM HTTP traffic.

Set PRIM_LOG_REQUESTS=true to log every outgoing request and the start of
every response body at INFO. Credentials never reach the log: the PRIM
apiKey header and the usual auth headers are masked.
"""

import json
import logging
import os
from collections.abc import Mapping
from typing import Any

logger = logging.getLogger(__name__)

LOG_REQUESTS_ENV = "PRIM_LOG_REQUESTS"
REDACTED = "***REDACTED***"
RESPONSE_EXCERPT_LENGTH = 500

SENSITIVE_HEADERS = frozenset({"apikey", "authorization", "cookie", "x-api-key"})


def should_log_requests() -> bool:
    """Whether PRIM_LOG_REQUESTS is set to "true" (any case)."""
    return os.getenv(LOG_REQUESTS_ENV, "").lower() == "true"


def _with_query(url: str, params: Mapping[str, Any] | None) -> str:
    """Append params to url in key order, after any query it already has."""
    if not params:
        return url
    query = "&".join(f"{key}={params[key]}" for key in sorted(params))
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{query}"


def _mask(headers: Mapping[str, str]) -> dict[str, str]:
    return {
        name: REDACTED if name.lower() in SENSITIVE_HEADERS else value
        for name, value in headers.items()
    }


def log_api_request(
    method: str,
    url: str,
    params: Mapping[str, Any] | None = None,
    headers: Mapping[str, str] | None = None,
) -> None:
    """Trace an outgoing request, with sensitive headers masked."""
    if not should_log_requests():
        return

    lines = [f"{method} {_with_query(url, params)}"]
    if headers:
        lines.append(f"Headers: {json.dumps(_mask(headers), indent=2)}")
    logger.info("API Request:\n" + "\n".join(lines))


def log_api_response(
    url: str, status: int, body: str, max_length: int = RESPONSE_EXCERPT_LENGTH
) -> None:
    """Trace a response status and the first max_length characters of its body."""
    if not should_log_requests():
        return

    excerpt = body[:max_length] if body else "(empty response body)"
    logger.info(f"API Response: {status} {url}\n{excerpt}")
