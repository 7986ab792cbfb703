"""
UrlValidator - validates URL syntax.
"""

import re
from typing import Any
from urllib.parse import urlsplit

from .base_validator import BaseValidator

SCHEME_PATTERN = re.compile(r"[A-Za-z][A-Za-z0-9+.\-]*")

# Schemes whose URLs carry no host component (mailto:me@example.com)
HOSTLESS_SCHEMES = frozenset({"mailto", "news", "file"})


class UrlValidator(BaseValidator):
    """
    Validates that the trimmed value is an absolute URL.

    A URL passes when it has a well-formed scheme, contains no whitespace,
    and names a host (with a numeric port, if any) unless its scheme is one
    of HOSTLESS_SCHEMES.
    """

    def validate(self, value: Any) -> None:
        if not self._is_url(self.as_text(value).strip()):
            raise self.fail(f"The {self.title} field was not a valid URL")

    @staticmethod
    def _is_url(text: str) -> bool:
        if not text or any(char.isspace() for char in text):
            return False

        try:
            parsed = urlsplit(text)
            # Raises ValueError for a non-numeric or out-of-range port
            parsed.port
        except ValueError:
            return False

        if not SCHEME_PATTERN.fullmatch(parsed.scheme):
            return False

        if parsed.scheme.lower() in HOSTLESS_SCHEMES:
            return bool(parsed.netloc or parsed.path)

        return bool(parsed.hostname)

    @property
    def rule_type(self) -> str:
        return "url"
