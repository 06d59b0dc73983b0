"""
signrequest_demo.api

API package (FastAPI app factory, dependencies, routers).

Responsibilities:
- Provide HTTP interface to the orchestrator and the demo page.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Keep business logic out of routers; call into services instead.
