"""
IpAddressValidator - validates IPv4 and IPv6 addresses.
"""

from ipaddress import IPv4Address, IPv6Address
from typing import Any

from .base_validator import BaseValidator


class IpAddressValidator(BaseValidator):
    """Validates that the trimmed value is an IPv4 or IPv6 address."""

    def validate(self, value: Any) -> None:
        text = self.as_text(value).strip()

        try:
            IPv4Address(text)
        except ValueError:
            try:
                IPv6Address(text)
            except ValueError:
                raise self.fail(f"The {self.title} field was not a valid ip address")

    @property
    def rule_type(self) -> str:
        return "ip"
