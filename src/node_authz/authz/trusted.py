"""
node_authz.authz.trusted

Trusted service identity.

Responsibilities:
- Enumerate the deployment systems the service can run in.
- Compute the privileged service name for a system and recognize callers using it.
"""

from __future__ import annotations

import enum


class SystemName(enum.StrEnum):
    # Values appear verbatim inside the trusted service name; treat as stable.
    dev = "dev"
    cd = "cd"
    main = "main"
    public = "public"
    publiccd = "publiccd"


def trusted_service_name(system: SystemName, org: str) -> str:
    """
    Name of the service allowed to access every resource in `system`.

    The main system uses the unqualified name, e.g. `vespa.vespa.hosting`;
    every other system splices its name in, e.g. `vespa.vespa.cd.hosting`.
    """

    if system is not SystemName.main:
        return f"{org}.{org}.{system.value}.hosting"
    return f"{org}.{org}.hosting"


def is_trusted_service(name: str, system: SystemName, org: str) -> bool:
    return name == trusted_service_name(system, org)


# --- Module Notes -----------------------------------------------------------
# Pure string computation; no I/O and no failure modes.
