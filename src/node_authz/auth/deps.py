"""
node_authz.auth.deps

Request authentication helpers.

Responsibilities:
- Turn the bearer token of a request into a typed `Principal`.
- Expose the principal authenticated by the middleware to route handlers.
"""

from __future__ import annotations

from fastapi import HTTPException, Request
from fastapi.security.utils import get_authorization_scheme_param
from starlette.status import HTTP_401_UNAUTHORIZED

from node_authz.auth.jwt import JwtConfig, JwtValidationError, principal_from_token
from node_authz.auth.models import Principal
from node_authz.settings import Settings


class AuthenticationError(Exception):
    pass


def jwt_cfg(settings: Settings) -> JwtConfig:
    return JwtConfig(
        alg=settings.jwt_alg,
        issuer=settings.jwt_issuer,
        audience=settings.jwt_audience,
        secret=settings.jwt_secret,
    )


def authenticate(request: Request, cfg: JwtConfig) -> Principal:
    scheme, token = get_authorization_scheme_param(request.headers.get("authorization"))
    if scheme.lower() != "bearer" or not token:
        raise AuthenticationError("Missing bearer token")
    try:
        return principal_from_token(cfg=cfg, token=token)
    except JwtValidationError as e:
        raise AuthenticationError(f"Invalid token: {e}") from e


def get_principal(request: Request) -> Principal:
    # Set by `api.middleware.AuthorizationMiddleware` for every non-public path.
    principal = getattr(request.state, "principal", None)
    if principal is None:
        raise HTTPException(status_code=HTTP_401_UNAUTHORIZED, detail="Not authenticated")
    return principal


# --- Module Notes -----------------------------------------------------------
# Authentication happens once per request in the middleware; routes only read the result.
