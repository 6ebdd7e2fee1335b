"""
Runtime configuration read from the environment (.env is loaded by backend.py).

Settings are read per request so that a key added to the environment takes effect
without a restart, and so tests can monkeypatch the environment freely.
"""

import os
from typing import Optional

from pydantic import BaseModel, Field

DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_AZURE_API_VERSION = "2024-12-01-preview"

_TRUTHY = ("1", "true", "yes", "on")


def _env(name: str) -> Optional[str]:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()


class Settings(BaseModel):
    openai_api_key: Optional[str] = Field(default=None, description="Credential for the chat completion service")
    openai_model: str = Field(default=DEFAULT_MODEL)
    openai_base_url: Optional[str] = Field(default=None, description="Override for OpenAI-compatible endpoints")
    azure_api_base: Optional[str] = Field(default=None, description="Azure OpenAI endpoint; switches to AzureOpenAI")
    azure_api_version: str = Field(default=DEFAULT_AZURE_API_VERSION)
    azure_deployment: Optional[str] = Field(default=None)
    fallback_on_missing_key: bool = Field(
        default=False,
        description="Serve the template plan instead of an error when no credential is configured",
    )
    log_level: str = Field(default="INFO")

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            openai_api_key=_env("OPENAI_API_KEY") or _env("AZURE_OPENAI_API_KEY"),
            openai_model=_env("OPENAI_MODEL") or DEFAULT_MODEL,
            openai_base_url=_env("OPENAI_BASE_URL"),
            azure_api_base=_env("AZURE_OPENAI_API_BASE"),
            azure_api_version=_env("AZURE_OPENAI_API_VERSION") or DEFAULT_AZURE_API_VERSION,
            azure_deployment=_env("AZURE_OPENAI_DEPLOYMENT"),
            fallback_on_missing_key=(_env("FALLBACK_ON_MISSING_KEY") or "").lower() in _TRUTHY,
            log_level=(_env("LOG_LEVEL") or "INFO").upper(),
        )

    @property
    def openai_configured(self) -> bool:
        return bool(self.openai_api_key)

    @property
    def use_azure(self) -> bool:
        return bool(self.azure_api_base)

    @property
    def model_name(self) -> str:
        """Model (or Azure deployment) name sent with each completion request."""
        if self.use_azure and self.azure_deployment:
            return self.azure_deployment
        return self.openai_model
