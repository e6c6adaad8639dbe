"""
node_authz.auth

Authentication package.

Responsibilities:
- JWT validation.
- The `Principal` identity type consumed by the authorizer.
"""

# Package marker.
