"""
node_authz.authz

Authorization decision core.

Responsibilities:
- Trusted service identity, resource extraction and ownership rules.
- The `Authorizer` composing them into one decision.
"""

from node_authz.authz.authorizer import Authorizer
from node_authz.authz.extractor import ResourceExtractor
from node_authz.authz.ownership import OwnershipChecker
from node_authz.authz.trusted import SystemName, is_trusted_service, trusted_service_name
from node_authz.authz.uri import RequestURI

__all__ = [
    "Authorizer",
    "OwnershipChecker",
    "RequestURI",
    "ResourceExtractor",
    "SystemName",
    "is_trusted_service",
    "trusted_service_name",
]


# --- Module Notes -----------------------------------------------------------
# Nothing here touches the database or the HTTP layer; adapters live in `inventory` and `api`.
