"""
node_authz.db.repositories.nodes

Repository for `Node` entities.

Responsibilities:
- Fetch nodes by hostname and list the children of a parent host.
- Register nodes (used by tests and inventory sync jobs).
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from node_authz.db.models import Node


class NodeRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, hostname: str) -> Node | None:
        return await self._session.get(Node, hostname)

    async def children_of(self, parent_hostname: str) -> Sequence[Node]:
        stmt = (
            select(Node)
            .where(Node.parent_hostname == parent_hostname)
            .order_by(Node.hostname)
        )
        return (await self._session.execute(stmt)).scalars().all()

    async def upsert(self, *, hostname: str, parent_hostname: str | None = None) -> Node:
        node = await self._session.get(Node, hostname)
        if node is None:
            node = Node(hostname=hostname, parent_hostname=parent_hostname)
            self._session.add(node)
        else:
            node.parent_hostname = parent_hostname
            node.updated_at = datetime.utcnow()
        await self._session.flush()
        return node


# --- Module Notes -----------------------------------------------------------
# Commit is left to the caller, matching the rest of the persistence layer.
