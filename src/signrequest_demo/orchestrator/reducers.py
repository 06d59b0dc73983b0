"""
signrequest_demo.orchestrator.reducers

Reducers define how LangGraph merges partial state updates returned by nodes.
"""

from __future__ import annotations

from typing import Any


def append_steps(
    left: list[dict[str, Any]] | None, right: list[dict[str, Any]] | None
) -> list[dict[str, Any]]:
    """
    Append-only reducer for the step trail.

    Nodes return `{"steps": [entry]}` and this reducer concatenates it onto the trail.
    """

    if not left:
        return list(right or [])
    if not right:
        return list(left)
    return [*left, *right]
