"""Pre-seeded answers for the setup prompts."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator


class Answers(BaseModel):
    """Raw answers loaded from an answers file.

    Values stay as the strings a user would have typed; they are validated
    by the same prompt classifiers as interactive input.
    """

    model_config = ConfigDict(extra='forbid')

    name: Optional[str] = None
    standard: Optional[str] = None
    exceptions: Optional[str] = None

    @field_validator('name', 'standard', 'exceptions', mode='before')
    @classmethod
    def require_scalar(cls, v):
        """Reject nested lists and mappings; scalars arrive as plain text."""
        if v is None or isinstance(v, str):
            return v
        raise ValueError(f"Expected a scalar value, got {type(v).__name__}")

    def for_field(self, field: str) -> Optional[str]:
        return getattr(self, field)
