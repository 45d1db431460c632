"""
Session Schema.

The identity cached locally after a successful login.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

ADMIN_ROLE = "Admin"


class Session(BaseModel):
    """Logged-in identity and bearer token."""

    name: str | None = Field(default=None, description="Display name")
    email: str | None = Field(default=None, description="Login email")
    role: str | None = Field(default=None, description="Admin, Operator, Commuter, ...")
    token: str = Field(min_length=1, description="Opaque bearer credential")

    model_config = ConfigDict(extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _flatten_user(cls, data: Any) -> Any:
        """Accept login responses that nest the identity under ``user``."""
        if isinstance(data, dict) and isinstance(data.get("user"), dict):
            return {**data["user"], **{k: v for k, v in data.items() if k != "user"}}
        return data

    @field_validator("token")
    @classmethod
    def _token_fits_header(cls, value: str) -> str:
        """The token is sent in an HTTP header, which only carries ASCII."""
        if not value.isascii():
            raise ValueError("token must be ASCII")
        return value

    @property
    def is_admin(self) -> bool:
        """True only for the exact role "Admin"."""
        return self.role == ADMIN_ROLE
