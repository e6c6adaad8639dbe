"""
node_authz.inventory.memory

In-memory node inventory.

Responsibilities:
- Serve `NodeLookup` from a dict, for tests and local development.
"""

from __future__ import annotations

from collections.abc import Iterable

from node_authz.inventory.base import NodeRecord


class InMemoryNodeInventory:
    def __init__(self, nodes: Iterable[NodeRecord] = ()) -> None:
        self._nodes: dict[str, NodeRecord] = {node.hostname: node for node in nodes}

    def add(self, hostname: str, *, parent_hostname: str | None = None) -> NodeRecord:
        node = NodeRecord(hostname=hostname, parent_hostname=parent_hostname)
        self._nodes[hostname] = node
        return node

    async def get_node(self, hostname: str) -> NodeRecord | None:
        return self._nodes.get(hostname)


# --- Module Notes -----------------------------------------------------------
# Not thread-safe for writers; populate before handing it to an authorizer.
