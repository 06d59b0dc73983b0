from __future__ import annotations

from collections.abc import Awaitable, Callable

from langgraph.graph import END, StateGraph

from signrequest_demo.orchestrator.nodes import (
    create_document_node,
    create_signrequest_node,
    extract_embed_url_node,
)
from signrequest_demo.orchestrator.state import SigningSessionState
from signrequest_demo.provider.client import SignRequestClient


def build_graph(*, client: SignRequestClient):
    """
    Returns a compiled LangGraph runnable.

    The graph is strictly linear: the signing request needs the document URL, so
    nothing can run in parallel, and any node raising aborts the run.
    """

    graph = StateGraph(SigningSessionState)

    graph.add_node("create_document", _bind_client(create_document_node, client))
    graph.add_node("create_signrequest", _bind_client(create_signrequest_node, client))
    graph.add_node("extract_embed_url", extract_embed_url_node)

    graph.set_entry_point("create_document")

    graph.add_edge("create_document", "create_signrequest")
    graph.add_edge("create_signrequest", "extract_embed_url")
    graph.add_edge("extract_embed_url", END)

    return graph.compile()


def _bind_client(
    fn: Callable[..., Awaitable[SigningSessionState]],
    client: SignRequestClient,
) -> Callable[[SigningSessionState], Awaitable[SigningSessionState]]:
    async def _wrapped(state: SigningSessionState) -> SigningSessionState:
        return await fn(state, client=client)

    return _wrapped
