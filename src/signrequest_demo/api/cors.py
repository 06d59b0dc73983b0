"""
signrequest_demo.api.cors

Permissive cross-origin headers attached to every orchestrator response.
"""

from __future__ import annotations

CORS_HEADERS: dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
}
