"""
node_authz.api.routers

API routers package.
"""

# Package marker.
