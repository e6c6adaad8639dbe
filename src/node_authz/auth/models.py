"""
node_authz.auth.models

Auth domain models.

Responsibilities:
- Define the authenticated identity type (`Principal`) handed to the authorizer.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Principal:
    """
    Authenticated caller identity.

    For nodes the name is the node's hostname; for services it is the service name.
    """

    name: str


# --- Module Notes -----------------------------------------------------------
# Keep this model minimal; the authorizer compares nothing but `name`.
