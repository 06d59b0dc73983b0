"""
signrequest_demo.orchestrator.state

Typed state schema used by the signing-session graph.

Responsibilities:
- Define the contract between nodes (inputs/outputs).
"""

from __future__ import annotations

from typing import Annotated, Any, TypedDict

from signrequest_demo.orchestrator.reducers import append_steps
from signrequest_demo.provider.models import Document, SignerIdentity, SignRequest


class SigningSessionState(TypedDict, total=False):
    # Inputs
    signer: SignerIdentity
    from_email: str

    # Step outputs
    document: Document
    signrequest: SignRequest
    embed_url: str

    # Trail of completed steps, logged by the service layer.
    steps: Annotated[list[dict[str, Any]], append_steps]


# --- Module Notes -----------------------------------------------------------
# Nothing in this state outlives a single invocation; it is never persisted.
