"""
Validation rule implementations.

Provides one validator per built-in rule: between, required, email, url, ip,
maxLength, minLength, alphaDash and date.
"""

from .base_validator import BaseValidator, ValidationError
from .between_validator import BetweenValidator
from .date_validator import DateValidator
from .email_address_validator import EmailAddressValidator
from .ip_validator import IpAddressValidator
from .length_validator import LengthValidator, MaxLengthValidator, MinLengthValidator
from .regex_validator import AlphaDashValidator, RegexValidator
from .required_field_validator import RequiredFieldValidator
from .url_validator import UrlValidator

__all__ = [
    "BaseValidator",
    "ValidationError",
    "BetweenValidator",
    "RequiredFieldValidator",
    "EmailAddressValidator",
    "UrlValidator",
    "IpAddressValidator",
    "LengthValidator",
    "MaxLengthValidator",
    "MinLengthValidator",
    "RegexValidator",
    "AlphaDashValidator",
    "DateValidator",
]
