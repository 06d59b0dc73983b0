"""
signrequest_demo.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for all layers.
- Hide provider/public credentials from repr/logging.
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Single settings object injected into the app at construction.

    Provider secrets are optional here on purpose: the orchestrator endpoint
    reports a missing secret as a per-request configuration error.
    """

    model_config = SettingsConfigDict(env_prefix="SIGNDEMO_", case_sensitive=False)

    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "signrequest-demo"
    log_level: str = "INFO"
    log_json: bool = True

    api_host: str = "0.0.0.0"
    api_port: int = 8080

    # SignRequest provider
    signrequest_api_base_url: str = "https://signrequest.com/api/v1"
    signrequest_api_key: str | None = Field(default=None, repr=False)
    signrequest_template_id: str | None = None

    # Demo signer identity
    signer_email: str = "test.signer@example.com"
    signer_first_name: str = "John"
    signer_last_name: str = "Doe"
    signer_user_id: str = "test-user-12345"
    from_email: str = "test@example.com"

    # Public credential gating the trigger call (also used by the demo page).
    public_api_key: str | None = Field(default=None, repr=False)

    # Where the demo page reaches the orchestrator; None means in-process.
    functions_base_url: str | None = None

    @property
    def provider_configured(self) -> bool:
        return bool(self.signrequest_api_key) and bool(self.signrequest_template_id)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars on every call.
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Settings are read once at process start; `api.app.create_app` stores the instance on
# `app.state` so routes and tests share the exact object that built the app.
