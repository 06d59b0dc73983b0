"""
signrequest_demo.auth

Authentication package.

Responsibilities:
- Gate the trigger endpoint behind the public (anon) credential.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The public credential only identifies the calling app; it is not a user login.
