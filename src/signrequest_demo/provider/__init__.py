"""
signrequest_demo.provider

SignRequest provider package.

Responsibilities:
- Typed request/response records for the provider REST API.
- HTTP client boundary used by the orchestrator.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The orchestrator should depend on this boundary (not on raw HTTP calls).
