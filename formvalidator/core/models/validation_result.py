"""
ValidationResult model representing the outcome of a validation run (ephemeral).
"""

from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ValidationResult(BaseModel):
    """
    Snapshot of a completed run.

    Note: ValidationResult is a copy; later runs on the same engine do not
    change it.

    Attributes:
        passed: Overall validation status
        errors: Messages per failing field, in rule-set order
        checked_fields: Fields that had rules applied, in execution order
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "passed": False,
                "errors": {"id": ["The id field requires a number between 1 and 10"]},
                "checked_fields": ["id", "email"],
            }
        }
    )

    passed: bool
    errors: Dict[str, List[str]] = Field(default_factory=dict)
    checked_fields: List[str] = Field(default_factory=list)

    @field_validator("errors")
    @classmethod
    def check_passed_consistency(cls, v, info):
        """Validate that passed=True implies errors is empty."""
        if info.data.get("passed") and len(v) > 0:
            raise ValueError("passed=True but errors is not empty")
        return v

    @property
    def error_count(self) -> int:
        """Number of fields with at least one error."""
        return len(self.errors)
