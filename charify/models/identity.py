"""Session identity models."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Role(str, Enum):
    """Roles a participant can hold in a request-scoped chat."""
    REQUESTER = "requester"
    TAKER = "taker"

    @classmethod
    def parse(cls, value: Any) -> "Role":
        """Parse a role from user input, rejecting anything outside the closed set."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            normalized = value.strip().lower()
            for role in cls:
                if role.value == normalized:
                    return role
        raise ValueError(f"Unknown role: {value!r}")


class UserIdentity(BaseModel):
    """Identity of the current session, set once by external authentication."""
    model_config = ConfigDict(frozen=True)

    user_id: str = Field(min_length=1)
    role: Role

    @field_validator("role", mode="before")
    @classmethod
    def _parse_role(cls, value: Any) -> Role:
        return Role.parse(value)
