"""
signrequest_demo.ui

Demo UI package.

Responsibilities:
- Client Requester state machine.
- Jinja2 template for the server-rendered demo page.
"""

# Package marker.
