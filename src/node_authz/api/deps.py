"""
node_authz.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Encapsulate app.state access patterns for the shared authorizer.
"""

from __future__ import annotations

from fastapi import Request

from node_authz.authz.authorizer import Authorizer


def authorizer_from_app(request: Request) -> Authorizer:
    # Created on app startup in `node_authz.api.app.create_app`.
    return request.app.state.authorizer  # type: ignore[attr-defined]


# --- Module Notes -----------------------------------------------------------
# The same `Authorizer` instance serves the middleware and the decision endpoint.
