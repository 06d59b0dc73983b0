"""
signrequest_demo.orchestrator

Orchestration package (LangGraph state machine).

Responsibilities:
- Typed state schema, step nodes, and graph compilation for one signing session.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Call sites should go through `services.signing_session_service`, not the graph directly.
