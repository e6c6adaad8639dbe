"""
node_authz.authz.ownership

Node ownership rules.

Responsibilities:
- Decide whether a caller owns a single node (itself, or a child hosted on it).
- Decide whether a caller owns every node in a list.
"""

from __future__ import annotations

from collections.abc import Sequence

from node_authz.inventory.base import NodeLookup, NodeLookupError
from node_authz.observability.logging import get_logger

log = get_logger(__name__)


def is_degenerate(hostname: str) -> bool:
    # Covers "", "." and ".."; the node API passes these unsanitized down to storage paths.
    return all(c == "." for c in hostname)


class OwnershipChecker:
    def __init__(self, node_lookup: NodeLookup) -> None:
        self._node_lookup = node_lookup

    async def can_access(self, name: str, hostname: str) -> bool:
        """Whether the caller called `name` may access the node `hostname`."""
        if is_degenerate(hostname):
            return False

        # A node can always access itself.
        if name == hostname:
            return True

        # A parent host can access its children.
        try:
            node = await self._node_lookup.get_node(hostname)
        except NodeLookupError as e:
            log.warning("node_lookup_failed", hostname=hostname, error=str(e))
            return False
        if node is None or node.parent_hostname is None:
            return False
        return node.parent_hostname == name

    async def can_access_all(self, name: str, hostnames: Sequence[str]) -> bool:
        """Whether the caller may access every node in `hostnames`; an empty list is denied."""
        if not hostnames:
            return False
        for hostname in hostnames:
            if not await self.can_access(name, hostname):
                return False
        return True


# --- Module Notes -----------------------------------------------------------
# A failed lookup is indistinguishable from "no such node" to callers: both deny.
