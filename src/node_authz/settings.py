"""
node_authz.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for all layers.
- Hide secrets from repr/logging (e.g., JWT secret).
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from node_authz.authz.trusted import SystemName


class Settings(BaseSettings):
    """
    Process configuration.

    Only the composition root (`api.app.create_app`) reads this; the authorizer
    core receives plain values at construction.
    """

    model_config = SettingsConfigDict(env_prefix="NODE_AUTHZ_", case_sensitive=False)

    # Environment controls toggle behavior like auto-init DB tables.
    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "node-authz"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 8080

    # Deployment system the service runs in; drives the trusted service identity.
    system: SystemName = SystemName.main
    trusted_org: str = "vespa"

    # API roots guarded by the authorizer (no trailing slash).
    node_api_root: str = "/nodes/v2"
    orchestrator_api_root: str = "/orchestrator/v1"

    # Paths served without authentication or authorization.
    public_paths: frozenset[str] = frozenset({"/healthz", "/readyz"})

    # Auth
    jwt_alg: str = "HS256"
    jwt_issuer: str = "node-authz"
    jwt_audience: str = "node-repository"
    jwt_secret: str = Field(default="dev-secret-change-me-before-deploying", repr=False)

    # Node inventory
    database_url: str = "sqlite+aiosqlite:///./node_authz.db"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars for each request dependency.
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Changing `system` or `trusted_org` changes which identity bypasses ownership
# checks; treat both as deployment-level, not per-request, values.
