"""
signrequest_demo.services.signing_session_service

Document session orchestration service.

Responsibilities:
- Take an already-validated `ProviderConfig` and a caller-owned HTTP client.
- Run the create-document → create-signrequest → extract-embed-url graph.
- Return a flat `SigningSession` or raise a `SigningSessionError`.
"""

from __future__ import annotations

import httpx
from pydantic import BaseModel

from signrequest_demo.errors import SigningSessionError
from signrequest_demo.observability.logging import get_logger
from signrequest_demo.orchestrator.graph import build_graph
from signrequest_demo.orchestrator.state import SigningSessionState
from signrequest_demo.provider.client import SignRequestClient
from signrequest_demo.provider.models import ProviderConfig, SignerIdentity

log = get_logger(__name__)


class SigningSession(BaseModel):
    embed_url: str
    document_id: str | None = None
    signrequest_id: str | None = None


class SigningSessionService:
    def __init__(
        self,
        *,
        config: ProviderConfig,
        http: httpx.AsyncClient,
        signer: SignerIdentity,
        from_email: str,
    ) -> None:
        self._client = SignRequestClient(config=config, http=http)
        self._graph = build_graph(client=self._client)
        self._signer = signer
        self._from_email = from_email

    async def create_session(self, *, signer: SignerIdentity | None = None) -> SigningSession:
        signer = signer or self._signer
        initial_state: SigningSessionState = {
            "signer": signer,
            "from_email": self._from_email,
            "steps": [],
        }

        try:
            final_state: SigningSessionState = await self._graph.ainvoke(initial_state)
        except SigningSessionError as e:
            log.warning("signing_session_aborted", kind=e.kind, error=e.message)
            raise

        session = SigningSession(
            embed_url=final_state["embed_url"],
            document_id=final_state["document"].uuid,
            signrequest_id=final_state["signrequest"].uuid,
        )
        log.info(
            "signing_session_created",
            steps=[s["event"] for s in final_state.get("steps", [])],
            document_id=session.document_id,
            signrequest_id=session.signrequest_id,
        )
        return session


# --- Module Notes -----------------------------------------------------------
# Configuration is validated before this service exists (`ProviderConfig.__post_init__`),
# so an instance always has both provider secrets.
