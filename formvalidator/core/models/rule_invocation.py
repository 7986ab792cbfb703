"""
RuleInvocation model representing one configured rule call on a field.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RuleInvocation(BaseModel):
    """
    A rule name paired with its ordered extra parameters.

    Attributes:
        name: Rule identifier ("required", "between", "maxLength", ...)
        params: Parameters appended after the field name, value and title

    Callers may use the loose forms accepted by `parse`; they are normalised
    here, at configuration time, so dispatch never has to guess the arity.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"name": "between", "params": [1, 10]}
        }
    )

    name: str = Field(..., min_length=1)
    params: list[Any] = Field(default_factory=list)

    @field_validator("params", mode="before")
    @classmethod
    def normalise_params(cls, v):
        """Accept None, a scalar or any list/tuple of parameters."""
        if v is None:
            return []
        if isinstance(v, list | tuple):
            return list(v)
        return [v]

    @classmethod
    def parse(cls, item: Any) -> "RuleInvocation":
        """
        Build an invocation from one of the accepted rule forms.

        Accepted forms:
            "required"                  bare rule name
            {"between": [1, 10]}        single-key mapping of name to params
            {"maxLength": 10}           scalar parameter
            ("between", [1, 10])        name/params pair
            RuleInvocation(...)         returned unchanged

        Raises:
            ValueError: If the item is none of the above
        """
        if isinstance(item, RuleInvocation):
            return item

        if isinstance(item, str):
            return cls(name=item)

        if isinstance(item, Mapping):
            if len(item) != 1:
                raise ValueError(f"Rule mapping must have exactly one key, got {len(item)}")
            name, params = next(iter(item.items()))
            return cls(name=name, params=params)

        if isinstance(item, tuple) and len(item) == 2:
            name, params = item
            return cls(name=name, params=params)

        raise ValueError(f"Unsupported rule definition: {item!r}")


def parse_checks(checks: Any) -> list[RuleInvocation]:
    """
    Normalise a field's rule list into RuleInvocations.

    `checks` is either a sequence of rule forms (see RuleInvocation.parse) or
    a mapping of rule name to parameters, e.g. {"required": None, "between": [1, 10]}.

    Raises:
        ValueError: If `checks` or any item in it is malformed
    """
    if isinstance(checks, Mapping):
        return [RuleInvocation.parse((name, params)) for name, params in checks.items()]

    if isinstance(checks, list | tuple):
        return [RuleInvocation.parse(item) for item in checks]

    raise ValueError(f"Rules must be a list or mapping, got {type(checks).__name__}")
