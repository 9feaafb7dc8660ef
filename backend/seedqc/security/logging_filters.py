"""Logging filters that scrub sensitive content."""

from __future__ import annotations

import logging
import re

REDACTED = "**REDACTED**"

_SENSITIVE_PATTERN = re.compile(
    r"(Authorization: Bearer\s+[\w\.-]+"
    r"|access_token\"?\s*[:=]\s*\"?[^\"\s,}]+\"?"
    r"|[\w\.+-]+@[\w-]+(?:\.[\w-]+)+)",
    re.IGNORECASE,
)


def redact(text: str) -> str:
    """Replace bearer tokens, access tokens and e-mail addresses."""
    return _SENSITIVE_PATTERN.sub(REDACTED, text)


class SensitiveFilter(logging.Filter):
    """Replace sensitive tokens in log messages with a redaction marker."""

    def filter(self, record: logging.LogRecord) -> bool:
        if isinstance(record.msg, str):
            record.msg = redact(record.msg)
        if isinstance(record.args, tuple):
            record.args = tuple(
                redact(arg) if isinstance(arg, str) else arg for arg in record.args
            )
        return True


__all__ = ["REDACTED", "SensitiveFilter", "redact"]
