"""Configuration contracts."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, model_validator

DEFAULT_TOKEN_ENV = "CONTENTFUL_MANAGEMENT_TOKEN"


class ContentformConfig(BaseModel):
    base_url: str = "https://api.contentful.com"
    token: str | None = Field(default=None, repr=False)
    token_env: str = DEFAULT_TOKEN_ENV
    timeout: float = Field(default=30.0, gt=0)
    resources_path: Path | None = None
    dry_run: bool = False

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_token_source(self) -> ContentformConfig:
        if self.token is not None and not self.token.strip():
            raise ValueError("token must be non-empty when set")
        if not self.token_env.strip():
            raise ValueError("token_env must be non-empty")
        return self
