"""
tests.conftest

Shared fixtures.

Responsibilities:
- Provide a small node inventory with one parent/child pair.
- Mint bearer tokens accepted by the test settings.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

import jwt
import pytest

from node_authz.authz.authorizer import Authorizer
from node_authz.authz.trusted import SystemName
from node_authz.inventory.base import NodeRecord
from node_authz.inventory.memory import InMemoryNodeInventory
from node_authz.settings import Settings


@pytest.fixture
def inventory() -> InMemoryNodeInventory:
    return InMemoryNodeInventory(
        [
            NodeRecord(hostname="parent1.example.com"),
            NodeRecord(hostname="host1.example.com", parent_hostname="parent1.example.com"),
            NodeRecord(hostname="host2.example.com", parent_hostname="parent1.example.com"),
            NodeRecord(hostname="host3.example.com", parent_hostname="parent2.example.com"),
        ]
    )


@pytest.fixture
def authorizer(inventory: InMemoryNodeInventory) -> Authorizer:
    return Authorizer(system=SystemName.main, node_lookup=inventory, org="org")


@pytest.fixture
def settings() -> Settings:
    return Settings(
        env="test",
        trusted_org="org",
        log_level="WARNING",
        jwt_secret="test-secret-with-enough-bytes-for-hs256",
    )


@pytest.fixture
def make_token(settings: Settings) -> Callable[..., str]:
    def _make(subject: str, *, secret: str | None = None) -> str:
        now = datetime.now(tz=UTC)
        payload = {
            "iss": settings.jwt_issuer,
            "aud": settings.jwt_audience,
            "sub": subject,
            "iat": int(now.timestamp()),
            "exp": int((now + timedelta(minutes=5)).timestamp()),
        }
        return jwt.encode(payload, secret or settings.jwt_secret, algorithm=settings.jwt_alg)

    return _make
