from __future__ import annotations

from typing import Any

from signrequest_demo.errors import MissingEmbedUrlError, ProviderResponseError
from signrequest_demo.observability.logging import get_logger
from signrequest_demo.orchestrator.state import SigningSessionState
from signrequest_demo.provider.client import SignRequestClient
from signrequest_demo.provider.models import DocumentCreate, SignRequestCreate

log = get_logger(__name__)

DOCUMENT_NAME_TEMPLATE = "Test Document for {email}"


def _step(event: str, **details: Any) -> list[dict[str, Any]]:
    return [{"event": event, "details": details}]


async def create_document_node(
    state: SigningSessionState, *, client: SignRequestClient
) -> SigningSessionState:
    signer = state["signer"]
    body = DocumentCreate(
        template=client.config.template_url,
        name=DOCUMENT_NAME_TEMPLATE.format(email=signer.email),
    )
    log.info("document_create_started", template=body.template, name=body.name)

    document = await client.create_document(body)
    if not document.url:
        # 2xx without a usable reference; the next call cannot be built.
        log.error("document_url_missing", document=document.model_dump())
        raise ProviderResponseError("Document created but no URL was returned.")

    log.info("document_created", document_id=document.uuid, document_url=document.url)
    return {
        "document": document,
        "steps": _step("CREATE_DOCUMENT", document_id=document.uuid),
    }


async def create_signrequest_node(
    state: SigningSessionState, *, client: SignRequestClient
) -> SigningSessionState:
    document = state["document"]
    body = SignRequestCreate(
        document=document.url or "",
        signers=[state["signer"]],
        from_email=state["from_email"],
    )
    log.info(
        "signrequest_create_started",
        document_url=body.document,
        signer=state["signer"].email,
    )

    signrequest = await client.create_signrequest(body)
    log.info(
        "signrequest_created",
        signrequest_id=signrequest.uuid,
        signers=len(signrequest.signers or []),
    )
    return {
        "signrequest": signrequest,
        "steps": _step("CREATE_SIGNREQUEST", signrequest_id=signrequest.uuid),
    }


async def extract_embed_url_node(state: SigningSessionState) -> SigningSessionState:
    signrequest = state["signrequest"]
    embed_url = signrequest.first_embed_url
    if not embed_url:
        log.error("embed_url_missing", signrequest=signrequest.model_dump())
        raise MissingEmbedUrlError(
            "No signing URL returned. Check your SignRequest template to ensure it has "
            "a signer placeholder."
        )

    return {"embed_url": embed_url, "steps": _step("EXTRACT_EMBED_URL")}
