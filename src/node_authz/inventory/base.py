"""
node_authz.inventory.base

Read-only node inventory contract consumed by the authorizer.

Responsibilities:
- Define the node record shape the authorizer needs (`NodeRecord`).
- Define the narrow lookup capability (`NodeLookup`) injected into the authorizer.
- Define the error an adapter raises for transient lookup failures.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True, slots=True)
class NodeRecord:
    hostname: str
    # Set when the node is hosted on another node (e.g. a container on a bare-metal host).
    parent_hostname: str | None = None


class NodeLookupError(Exception):
    """The inventory could not be consulted (as opposed to: the node does not exist)."""


@runtime_checkable
class NodeLookup(Protocol):
    async def get_node(self, hostname: str) -> NodeRecord | None:
        """Return the node with `hostname`, or None if there is no such node."""
        ...


# --- Module Notes -----------------------------------------------------------
# Adapters live next to this module (`memory`, `sql`); the authorizer only ever
# depends on `NodeLookup`.
