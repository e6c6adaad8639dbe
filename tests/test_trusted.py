"""
tests.test_trusted

Trusted service identity.

Responsibilities:
- Cover the trusted service name for the main system and every other system.
"""

from __future__ import annotations

import pytest

from node_authz.authz.trusted import SystemName, is_trusted_service, trusted_service_name


def test_main_system_uses_unqualified_name() -> None:
    assert trusted_service_name(SystemName.main, "org") == "org.org.hosting"


@pytest.mark.parametrize(
    ("system", "expected"),
    [
        (SystemName.cd, "org.org.cd.hosting"),
        (SystemName.dev, "org.org.dev.hosting"),
        (SystemName.public, "org.org.public.hosting"),
        (SystemName.publiccd, "org.org.publiccd.hosting"),
    ],
)
def test_other_systems_are_qualified(system: SystemName, expected: str) -> None:
    assert trusted_service_name(system, "org") == expected


def test_is_trusted_service() -> None:
    assert is_trusted_service("vespa.vespa.hosting", SystemName.main, "vespa")
    assert is_trusted_service("vespa.vespa.cd.hosting", SystemName.cd, "vespa")
    # The main system's name carries no privilege in other systems, and vice versa.
    assert not is_trusted_service("vespa.vespa.hosting", SystemName.cd, "vespa")
    assert not is_trusted_service("vespa.vespa.cd.hosting", SystemName.main, "vespa")
    assert not is_trusted_service("host1.example.com", SystemName.main, "vespa")
