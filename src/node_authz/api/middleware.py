"""
node_authz.api.middleware

HTTP middleware enforcing authentication and authorization.

Responsibilities:
- Authenticate the bearer token of every non-public request.
- Ask the `Authorizer` whether the caller may access the requested URI.
- Reject with 401/403 before the request reaches routing.
"""

from __future__ import annotations

from collections.abc import Iterable

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.status import HTTP_401_UNAUTHORIZED, HTTP_403_FORBIDDEN
from starlette.types import ASGIApp

from node_authz.auth.deps import AuthenticationError, authenticate
from node_authz.auth.jwt import JwtConfig
from node_authz.authz.authorizer import Authorizer
from node_authz.authz.uri import RequestURI, request_path
from node_authz.observability.logging import get_logger

log = get_logger(__name__)


class AuthorizationMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: ASGIApp, *, jwt_cfg: JwtConfig, public_paths: Iterable[str]) -> None:
        super().__init__(app)
        self._jwt_cfg = jwt_cfg
        self._public_paths = frozenset(public_paths)

    async def dispatch(self, request: Request, call_next) -> Response:
        path = request_path(request)
        if path in self._public_paths:
            return await call_next(request)

        try:
            principal = authenticate(request, self._jwt_cfg)
        except AuthenticationError as e:
            log.info("authn_rejected", error=str(e))
            return JSONResponse(
                {"detail": str(e)},
                status_code=HTTP_401_UNAUTHORIZED,
                headers={"WWW-Authenticate": "Bearer"},
            )

        structlog.contextvars.bind_contextvars(principal=principal.name)

        # The authorizer is created during app startup (see `api.app.create_app`).
        authorizer: Authorizer = request.app.state.authorizer
        if not await authorizer.is_authorized(principal, RequestURI.from_request(request)):
            log.info("authz_denied")
            return JSONResponse(
                {"detail": f"{principal.name} is not authorized to access {path}"},
                status_code=HTTP_403_FORBIDDEN,
            )

        request.state.principal = principal
        return await call_next(request)


# --- Module Notes -----------------------------------------------------------
# Authorization runs before routing: a denied caller gets 403 even for paths
# that no route serves.
