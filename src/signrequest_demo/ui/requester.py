"""
signrequest_demo.ui.requester

Client Requester: calls the orchestrator endpoint and tracks the outcome.

Responsibilities:
- Issue the trigger call with the public credential.
- Track one of four states (idle, loading, success, error) and record transitions.
- Collapse every failure into a single displayable message.
"""

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass

import httpx

from signrequest_demo.observability.logging import get_logger

log = get_logger(__name__)

FUNCTION_PATH = "/functions/v1/create-signrequest-document"


class RequestStatus(enum.StrEnum):
    idle = "idle"
    loading = "loading"
    success = "success"
    error = "error"


class RequesterError(Exception):
    pass


@dataclass(frozen=True, slots=True)
class RequesterView:
    """
    Immutable snapshot handed to the page template.
    """

    status: RequestStatus
    embed_url: str
    error: str
    is_loading: bool


class SigningSessionRequester:
    def __init__(
        self,
        *,
        http: httpx.AsyncClient,
        functions_base_url: str | None,
        public_api_key: str | None,
        extra_headers: dict[str, str] | None = None,
        on_change: Callable[[RequestStatus], None] | None = None,
    ) -> None:
        self._http = http
        self._base_url = (functions_base_url or "").rstrip("/")
        self._public_api_key = public_api_key or ""
        self._extra_headers = dict(extra_headers or {})
        self._on_change = on_change

        self.status = RequestStatus.idle
        self.embed_url = ""
        self.error = ""
        self.is_loading = False
        self.transitions: list[RequestStatus] = [RequestStatus.idle]

    def _set_status(self, status: RequestStatus) -> None:
        self.status = status
        self.transitions.append(status)
        if self._on_change is not None:
            self._on_change(status)

    async def load(self) -> RequestStatus:
        """
        Run one trigger call. Not guarded against re-entry; callers hide the
        reload control while `is_loading` is set.
        """

        self.is_loading = True
        self.error = ""
        self.embed_url = ""
        self._set_status(RequestStatus.loading)

        try:
            self.embed_url = await self._fetch_embed_url()
            self._set_status(RequestStatus.success)
        except (RequesterError, httpx.HTTPError, ValueError) as e:
            # ValueError covers a response body that is not JSON.
            self.error = str(e) or "Unknown error occurred"
            log.warning("signing_session_request_failed", error=self.error)
            self._set_status(RequestStatus.error)
        finally:
            self.is_loading = False

        return self.status

    async def _fetch_embed_url(self) -> str:
        if not self._base_url or not self._public_api_key:
            raise RequesterError(
                "Function endpoint configuration missing. Please check your environment."
            )

        r = await self._http.post(
            f"{self._base_url}{FUNCTION_PATH}",
            headers={
                "Authorization": f"Bearer {self._public_api_key}",
                "apikey": self._public_api_key,
                **self._extra_headers,
            },
            json={},
        )
        data = r.json()

        if not r.is_success:
            message = data.get("error") if isinstance(data, dict) else None
            raise RequesterError(message or f"HTTP {r.status_code}: {r.reason_phrase}")

        embed_url = data.get("embed_url") if isinstance(data, dict) else None
        if not embed_url:
            raise RequesterError("No embed URL returned from the function")
        return str(embed_url)

    def view(self) -> RequesterView:
        return RequesterView(
            status=self.status,
            embed_url=self.embed_url,
            error=self.error,
            is_loading=self.is_loading,
        )


# --- Module Notes -----------------------------------------------------------
# The requester never retries on its own; a new `load()` starts from scratch.
