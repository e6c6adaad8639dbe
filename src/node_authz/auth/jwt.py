"""
node_authz.auth.jwt

JWT validation helpers.

Responsibilities:
- Decode and validate JWTs with strict claim requirements (iss/aud/exp/iat/sub).
- Map a validated token to a `Principal`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import jwt
from jwt import InvalidTokenError

from node_authz.auth.models import Principal


@dataclass(frozen=True, slots=True)
class JwtConfig:
    # Algorithm/issuer/audience are enforced during decoding.
    alg: str
    issuer: str
    audience: str
    secret: str


class JwtValidationError(Exception):
    pass


def decode_and_validate(*, cfg: JwtConfig, token: str) -> dict[str, Any]:
    try:
        return jwt.decode(
            token,
            cfg.secret,
            algorithms=[cfg.alg],
            issuer=cfg.issuer,
            audience=cfg.audience,
            options={
                "require": ["exp", "iat", "iss", "aud", "sub"],
            },
        )
    except InvalidTokenError as e:
        raise JwtValidationError(str(e)) from e


def principal_from_token(*, cfg: JwtConfig, token: str) -> Principal:
    payload = decode_and_validate(cfg=cfg, token=token)
    subject = str(payload.get("sub", ""))
    if not subject:
        raise JwtValidationError("empty subject")
    return Principal(name=subject)


# --- Module Notes -----------------------------------------------------------
# Tokens are minted elsewhere (identity provider); this service only verifies them.
