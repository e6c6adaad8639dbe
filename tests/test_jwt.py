from __future__ import annotations

from collections.abc import Callable

import pytest

from node_authz.auth.deps import jwt_cfg
from node_authz.auth.jwt import JwtValidationError, decode_and_validate, principal_from_token
from node_authz.auth.models import Principal
from node_authz.settings import Settings


def test_valid_token_yields_principal(settings: Settings, make_token: Callable[..., str]) -> None:
    principal = principal_from_token(cfg=jwt_cfg(settings), token=make_token("host1.example.com"))
    assert principal == Principal(name="host1.example.com")


def test_wrong_secret_is_rejected(settings: Settings, make_token: Callable[..., str]) -> None:
    token = make_token("host1.example.com", secret="another-secret-with-enough-bytes-for-hs256")
    with pytest.raises(JwtValidationError):
        decode_and_validate(cfg=jwt_cfg(settings), token=token)


def test_wrong_audience_is_rejected(settings: Settings, make_token: Callable[..., str]) -> None:
    other = settings.model_copy(update={"jwt_audience": "someone-else"})
    with pytest.raises(JwtValidationError):
        decode_and_validate(cfg=jwt_cfg(other), token=make_token("host1.example.com"))


def test_empty_subject_is_rejected(settings: Settings, make_token: Callable[..., str]) -> None:
    with pytest.raises(JwtValidationError):
        principal_from_token(cfg=jwt_cfg(settings), token=make_token(""))


def test_garbage_is_rejected(settings: Settings) -> None:
    with pytest.raises(JwtValidationError):
        decode_and_validate(cfg=jwt_cfg(settings), token="not-a-jwt")
