"""
node_authz.api.routers.health

Health and readiness endpoints.

Responsibilities:
- Provide liveness probe (`/healthz`).
- Provide readiness probe (`/readyz`) with inventory DB connectivity validation.
"""

from __future__ import annotations

from fastapi import APIRouter, Request
from sqlalchemy import text

router = APIRouter()


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/readyz")
async def readyz(request: Request) -> dict[str, str]:
    # No engine means the inventory was injected (tests, embedded use); nothing to probe.
    engine = getattr(request.app.state, "engine", None)
    if engine is not None:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    return {"status": "ready"}


# --- Module Notes -----------------------------------------------------------
# Both paths are in `Settings.public_paths` by default, so probes need no token.
