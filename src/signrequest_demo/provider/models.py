"""
signrequest_demo.provider.models

Typed records exchanged with the SignRequest REST API.

Responsibilities:
- Define the request bodies sent to the provider.
- Validate provider responses at the deserialization boundary.
- Hold the injected provider configuration (`ProviderConfig`).
"""

from __future__ import annotations

from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict, Field

from signrequest_demo.errors import ConfigurationError
from signrequest_demo.settings import Settings

DEFAULT_API_BASE_URL = "https://signrequest.com/api/v1"


@dataclass(frozen=True, slots=True)
class ProviderConfig:
    """
    Provider credentials and endpoint. Validated on construction so a
    missing secret fails before any request is built.
    """

    api_key: str = field(repr=False)
    template_id: str
    base_url: str = DEFAULT_API_BASE_URL

    def __post_init__(self) -> None:
        if not self.api_key:
            raise ConfigurationError("SignRequest API key not configured.")
        if not self.template_id:
            raise ConfigurationError("Template ID not configured.")

    @classmethod
    def from_settings(cls, settings: Settings) -> ProviderConfig:
        return cls(
            api_key=settings.signrequest_api_key or "",
            template_id=settings.signrequest_template_id or "",
            base_url=settings.signrequest_api_base_url.rstrip("/"),
        )

    @property
    def template_url(self) -> str:
        # The provider references templates by their API URL, not by bare id.
        return f"{self.base_url}/templates/{self.template_id}/"


class _ProviderResponse(BaseModel):
    # Provider payloads carry many more fields than we read.
    model_config = ConfigDict(extra="ignore")


class SignerIdentity(BaseModel):
    email: str
    first_name: str
    last_name: str
    # Application-side correlation id echoed back by the provider.
    embed_url_user_id: str

    @classmethod
    def from_settings(cls, settings: Settings) -> SignerIdentity:
        return cls(
            email=settings.signer_email,
            first_name=settings.signer_first_name,
            last_name=settings.signer_last_name,
            embed_url_user_id=settings.signer_user_id,
        )


class DocumentCreate(BaseModel):
    template: str
    name: str


class Document(_ProviderResponse):
    uuid: str | None = None
    url: str | None = None
    name: str | None = None


class SignRequestCreate(BaseModel):
    document: str
    signers: list[SignerIdentity] = Field(min_length=1)
    from_email: str


class SignRequestSigner(_ProviderResponse):
    email: str | None = None
    embed_url: str | None = None


class SignRequest(_ProviderResponse):
    uuid: str | None = None
    signers: list[SignRequestSigner] | None = None

    @property
    def first_embed_url(self) -> str | None:
        if not self.signers:
            return None
        return self.signers[0].embed_url or None


# --- Module Notes -----------------------------------------------------------
# Only fields the orchestrator reads are modelled; everything else the provider
# returns is dropped during validation.
