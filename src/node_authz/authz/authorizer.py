"""
node_authz.authz.authorizer

Authorizer for the node repository and orchestrator REST APIs.

Responsibilities:
- Hold the authorization rules for all API paths in one place.
- Compose the trusted service bypass, resource extraction and ownership checks
  into a single allow/deny decision.

The orchestrator API is authorized here rather than in the orchestrator itself
because some of its decisions need the node inventory (parent/child hosts).
"""

from __future__ import annotations

from node_authz.auth.models import Principal
from node_authz.authz.extractor import ResourceExtractor
from node_authz.authz.ownership import OwnershipChecker
from node_authz.authz.trusted import SystemName, is_trusted_service, trusted_service_name
from node_authz.authz.uri import RequestURI
from node_authz.inventory.base import NodeLookup
from node_authz.observability.logging import get_logger

log = get_logger(__name__)

DEFAULT_NODE_API_ROOT = "/nodes/v2"
DEFAULT_ORCHESTRATOR_API_ROOT = "/orchestrator/v1"


class Authorizer:
    """
    Decides whether a principal may access a request URI.

    Stateless apart from the configuration given here; safe to share between
    concurrent requests.
    """

    def __init__(
        self,
        *,
        system: SystemName,
        node_lookup: NodeLookup,
        org: str = "vespa",
        node_api_root: str = DEFAULT_NODE_API_ROOT,
        orchestrator_api_root: str = DEFAULT_ORCHESTRATOR_API_ROOT,
    ) -> None:
        self._system = system
        self._org = org
        self._extractor = ResourceExtractor(
            node_api_root=node_api_root,
            orchestrator_api_root=orchestrator_api_root,
        )
        self._ownership = OwnershipChecker(node_lookup)

    @property
    def trusted_service(self) -> str:
        return trusted_service_name(self._system, self._org)

    @property
    def extractor(self) -> ResourceExtractor:
        return self._extractor

    async def is_authorized(self, principal: Principal, uri: RequestURI) -> bool:
        # Trusted services can access everything.
        if is_trusted_service(principal.name, self._system, self._org):
            log.debug("authz_decision", principal=principal.name, allowed=True, reason="trusted")
            return True

        # Nodes can only access their own resources (or those of their children).
        hostnames = self._extractor.hostnames(uri)
        allowed = await self._ownership.can_access_all(principal.name, hostnames)
        log.debug(
            "authz_decision",
            principal=principal.name,
            allowed=allowed,
            reason="ownership",
            hostnames=list(hostnames),
        )
        return allowed

    async def __call__(self, principal: Principal, uri: RequestURI) -> bool:
        return await self.is_authorized(principal, uri)


# --- Module Notes -----------------------------------------------------------
# The decision is a pure function of (principal, uri, inventory at call time).
