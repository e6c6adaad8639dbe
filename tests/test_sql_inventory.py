"""
tests.test_sql_inventory

SQL-backed node inventory.

Responsibilities:
- Verify `NodeRepo` and `SqlNodeInventory` against a SQLite file database.
- Verify the app wires a SQL inventory when none is injected.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import httpx
import pytest

from node_authz.api.app import create_app
from node_authz.db.init_db import init_db
from node_authz.db.repositories.nodes import NodeRepo
from node_authz.db.session import create_engine, create_sessionmaker
from node_authz.inventory.base import NodeLookupError, NodeRecord
from node_authz.inventory.sql import SqlNodeInventory
from node_authz.settings import Settings


def sqlite_settings(settings: Settings, tmp_path: Path) -> Settings:
    return settings.model_copy(
        update={"database_url": f"sqlite+aiosqlite:///{tmp_path / 'inventory.db'}"}
    )


@pytest.mark.asyncio
async def test_repo_and_lookup(settings: Settings, tmp_path: Path) -> None:
    engine = create_engine(sqlite_settings(settings, tmp_path))
    try:
        await init_db(engine)
        session_factory = create_sessionmaker(engine)
        async with session_factory() as session:
            repo = NodeRepo(session)
            await repo.upsert(hostname="parent1.example.com")
            await repo.upsert(hostname="host2.example.com", parent_hostname="parent1.example.com")
            await repo.upsert(hostname="host1.example.com", parent_hostname="parent2.example.com")
            # Re-registering moves the node to another parent.
            await repo.upsert(hostname="host1.example.com", parent_hostname="parent1.example.com")
            await session.commit()

        async with session_factory() as session:
            children = await NodeRepo(session).children_of("parent1.example.com")
            assert [node.hostname for node in children] == [
                "host1.example.com",
                "host2.example.com",
            ]

        inventory = SqlNodeInventory(session_factory)
        assert await inventory.get_node("host1.example.com") == NodeRecord(
            hostname="host1.example.com", parent_hostname="parent1.example.com"
        )
        assert await inventory.get_node("parent1.example.com") == NodeRecord(
            hostname="parent1.example.com"
        )
        assert await inventory.get_node("missing.example.com") is None
    finally:
        await engine.dispose()


@pytest.mark.asyncio
async def test_lookup_failure_is_reported(settings: Settings, tmp_path: Path) -> None:
    # No tables created: every query fails at the driver level.
    engine = create_engine(sqlite_settings(settings, tmp_path))
    try:
        inventory = SqlNodeInventory(create_sessionmaker(engine))
        with pytest.raises(NodeLookupError):
            await inventory.get_node("host1.example.com")
    finally:
        await engine.dispose()


@pytest.mark.asyncio
async def test_app_uses_sql_inventory(
    settings: Settings, tmp_path: Path, make_token: Callable[..., str]
) -> None:
    app = create_app(settings=sqlite_settings(settings, tmp_path))
    async with app.router.lifespan_context(app):
        async with app.state.sessionmaker() as session:
            await NodeRepo(session).upsert(
                hostname="host1.example.com", parent_hostname="parent1.example.com"
            )
            await session.commit()

        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            r = await client.get("/readyz")
            assert r.status_code == 200

            headers = {"Authorization": f"Bearer {make_token('parent1.example.com')}"}
            r = await client.get("/nodes/v2/acl/host1.example.com", headers=headers)
            assert r.status_code == 404

            headers = {"Authorization": f"Bearer {make_token('parent2.example.com')}"}
            r = await client.get("/nodes/v2/acl/host1.example.com", headers=headers)
            assert r.status_code == 403
