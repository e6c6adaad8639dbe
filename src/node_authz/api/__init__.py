"""
node_authz.api

HTTP layer.

Responsibilities:
- App factory, authorization middleware, and routers.
"""

# Package marker.
