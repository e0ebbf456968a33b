"""Logging helpers that keep credentials out of debug output.

Chat handlers log request bodies and provider configs while debugging; those
carry API keys. RedactingFilter rewrites a record's arguments before any
handler formats them.
"""

from __future__ import annotations

import logging
import re
from typing import Any

from toolscope import environment

REDACTED = "[REDACTED]"
REDACTED_API_KEY = "[REDACTED_API_KEY]"

SENSITIVE_KEYS: frozenset[str] = frozenset(
    {
        "apikey",
        "api_key",
        "accesstoken",
        "access_token",
        "token",
        "secret",
        "password",
        "passwd",
        "pwd",
        "key",
        "auth",
        "authorization",
        "credential",
        "credentials",
        "bearer",
        "jwt",
        "sessionid",
        "session_id",
        "cookie",
        "cookies",
        "private_key",
        "signature",
    }
)

_SENSITIVE_PATTERN = re.compile(
    r"(key|token|password|secret)$|auth|credential|private|session|cookie|signature",
    re.IGNORECASE,
)
_API_KEY_LIKE = re.compile(r"^(?=.*\d)[A-Za-z0-9_\-]{21,}$")

MAX_DEPTH = 10


def is_sensitive_key(key: str) -> bool:
    return key.lower() in SENSITIVE_KEYS or bool(_SENSITIVE_PATTERN.search(key))


def redact(value: Any, depth: int = 0) -> Any:
    """Return a copy of ``value`` with credentials masked.

    Values under sensitive keys become "[REDACTED]". Long opaque strings that
    look like API keys become "[REDACTED_API_KEY]".
    """
    if depth > MAX_DEPTH:
        return "[Max Depth Reached]"
    if isinstance(value, str):
        return REDACTED_API_KEY if _API_KEY_LIKE.match(value) else value
    if isinstance(value, dict):
        return {
            k: REDACTED if isinstance(k, str) and is_sensitive_key(k) else redact(v, depth + 1)
            for k, v in value.items()
        }
    if isinstance(value, (list, tuple)):
        return type(value)(redact(item, depth + 1) for item in value)
    return value


class RedactingFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        if isinstance(record.args, dict):
            record.args = redact(record.args)
        elif record.args:
            record.args = tuple(redact(arg) for arg in record.args)
        return True


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """Attach a redacting stream handler to the ``toolscope`` logger.

    For applications and scripts; the library itself never configures logging.
    Calling it again replaces the previously installed handler.
    """
    root = logging.getLogger("toolscope")
    root.setLevel(level if level is not None else environment.log_level())
    for handler in list(root.handlers):
        if getattr(handler, "_toolscope_handler", False):
            root.removeHandler(handler)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s"))
    handler.addFilter(RedactingFilter())
    handler._toolscope_handler = True  # type: ignore[attr-defined]
    root.addHandler(handler)
    return root
