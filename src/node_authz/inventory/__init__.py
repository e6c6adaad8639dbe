"""
node_authz.inventory

Node inventory package.

Responsibilities:
- Define the read-only lookup contract the authorizer depends on.
- Provide in-memory and SQL-backed implementations.
"""

from node_authz.inventory.base import NodeLookup, NodeLookupError, NodeRecord
from node_authz.inventory.memory import InMemoryNodeInventory

__all__ = ["InMemoryNodeInventory", "NodeLookup", "NodeLookupError", "NodeRecord"]


# --- Module Notes -----------------------------------------------------------
# `inventory.sql` is not re-exported so that importing the contract does not pull
# in SQLAlchemy.
