"""
tests.fakes

Canned provider responses and test settings.
"""

from __future__ import annotations

from typing import Any

import httpx

from signrequest_demo.settings import Settings

PROVIDER_BASE_URL = "https://signrequest.test/api/v1"
DOCUMENT_URL = "https://provider/doc/d1/"
EMBED_URL = "https://provider/sign/abc"
FUNCTION_URL = "/functions/v1/create-signrequest-document"


def make_settings(**overrides: Any) -> Settings:
    values: dict[str, Any] = {
        "env": "test",
        "log_json": False,
        "signrequest_api_base_url": PROVIDER_BASE_URL,
        "signrequest_api_key": "sr-secret-token",
        "signrequest_template_id": "tmpl-123",
        "public_api_key": None,
        "functions_base_url": None,
    }
    values.update(overrides)
    return Settings(**values)


def document_ok() -> httpx.Response:
    return httpx.Response(201, json={"uuid": "d1", "url": DOCUMENT_URL, "name": "Test Document"})


def signrequest_ok() -> httpx.Response:
    return httpx.Response(201, json={"uuid": "s1", "signers": [{"embed_url": EMBED_URL}]})
