"""
node_authz.api.app

FastAPI app factory for the node authorizer service.

Responsibilities:
- Build the FastAPI application and register routers/middleware.
- Initialize and dispose shared infrastructure (inventory DB engine, authorizer).
- Provide a single composition root where cross-cutting concerns live.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from node_authz import __version__
from node_authz.api.middleware import AuthorizationMiddleware
from node_authz.api.routers.decisions import router as decisions_router
from node_authz.api.routers.health import router as health_router
from node_authz.auth.deps import jwt_cfg
from node_authz.authz.authorizer import Authorizer
from node_authz.db.init_db import init_db
from node_authz.db.session import create_engine, create_sessionmaker
from node_authz.inventory.base import NodeLookup
from node_authz.inventory.sql import SqlNodeInventory
from node_authz.observability.logging import configure_logging, get_logger
from node_authz.observability.middleware import RequestContextMiddleware
from node_authz.settings import Settings

log = get_logger(__name__)


def create_app(*, settings: Settings, node_lookup: NodeLookup | None = None) -> FastAPI:
    """
    Build the service.

    With `node_lookup` the given inventory is used as-is and no database is
    touched; otherwise a SQL-backed inventory is created on startup.
    """

    configure_logging(service_name=settings.service_name, level=settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env, system=settings.system.value)
        lookup = node_lookup
        if lookup is None:
            engine = create_engine(settings)
            app.state.engine = engine
            app.state.sessionmaker = create_sessionmaker(engine)
            if settings.env in ("dev", "test"):
                # Dev/test convenience: create tables automatically. Prod should use Alembic migrations.
                await init_db(engine)
            lookup = SqlNodeInventory(app.state.sessionmaker)

        app.state.authorizer = Authorizer(
            system=settings.system,
            node_lookup=lookup,
            org=settings.trusted_org,
            node_api_root=settings.node_api_root,
            orchestrator_api_root=settings.orchestrator_api_root,
        )
        try:
            yield
        finally:
            engine = getattr(app.state, "engine", None)
            if engine is not None:
                await engine.dispose()
            log.info("shutdown")

    app = FastAPI(
        title="Node Repository Authorizer",
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # Starlette runs the last-added middleware first: request context wraps authorization.
    app.add_middleware(
        AuthorizationMiddleware,
        jwt_cfg=jwt_cfg(settings),
        public_paths=settings.public_paths,
    )
    app.add_middleware(RequestContextMiddleware)
    app.include_router(health_router, tags=["health"])
    app.include_router(decisions_router)

    return app


# --- Module Notes -----------------------------------------------------------
# The node repository and orchestrator routes themselves are served elsewhere;
# this app authorizes requests and answers decision queries.
