"""
signrequest_demo.api.routers

Router modules mounted by `signrequest_demo.api.app.create_app`.
"""

# Package marker.
