"""
signrequest_demo.services

Service-layer package.

Responsibilities:
- Assemble the provider client and orchestration graph for one invocation.
- Reshape the final graph state into the public result record.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Services should be pure Python and easily testable with fake/mocked HTTP transports.
