"""
node_authz.authz.extractor

Resource extraction from request URIs.

Responsibilities:
- Map a request URI to the hostnames it addresses, using an ordered rule table.
- Provide the path helpers the rules are built from (sub-path test, first/last segment).
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from node_authz.authz.uri import RequestURI

# Query parameters that carry target hostnames on batch/command endpoints.
HOSTNAME_PARAMS = ("hostname", "parentHost")


def is_child_of(parent: str, child: str) -> bool:
    """Whether `child` is a strict sub-path of `parent`."""
    return child.startswith(parent) and len(child) > len(parent)


def first_child_of(root: str, path: str) -> str | None:
    """First component of `path` relative to `root`, or None if `path` is not below `root`."""
    if not is_child_of(root, path):
        return None
    rest = path[len(root) :]
    head, _, _ = rest.partition("/")
    return head


def last_child_of(path: str) -> str:
    """Last component of `path`, ignoring one trailing separator."""
    if path.endswith("/"):
        path = path[:-1]
    return path.rpartition("/")[2]


def hostnames_from_query(uri: RequestURI) -> list[str]:
    return [value for value in uri.values(*HOSTNAME_PARAMS) if value]


@dataclass(frozen=True, slots=True)
class PathRule:
    """One entry of the extraction table: a path predicate and the strategy used when it matches."""

    name: str
    matches: Callable[[str], bool]
    extract: Callable[[RequestURI], list[str]]


class ResourceExtractor:
    """
    Ordered, first-match-wins table of known API path shapes.

    Roots are given without a trailing slash, e.g. `/nodes/v2` and `/orchestrator/v1`.
    """

    def __init__(self, *, node_api_root: str, orchestrator_api_root: str) -> None:
        nodes = node_api_root.rstrip("/")
        orchestrator = orchestrator_api_root.rstrip("/")

        node_resources = (f"{nodes}/acl/", f"{nodes}/node/", f"{nodes}/state/")
        hosts = f"{orchestrator}/hosts/"
        suspensions = f"{orchestrator}/suspensions/hosts/"
        node_collection = f"{nodes}/node/"
        command = f"{nodes}/command/"

        self._rules: tuple[PathRule, ...] = (
            PathRule(
                name="node-resource",
                matches=lambda path: any(is_child_of(root, path) for root in node_resources),
                extract=lambda uri: [last_child_of(uri.path)],
            ),
            PathRule(
                name="orchestrator-host",
                matches=lambda path: is_child_of(hosts, path),
                extract=lambda uri: _optional(first_child_of(hosts, uri.path)),
            ),
            PathRule(
                name="suspension-batch",
                matches=lambda path: is_child_of(suspensions, path),
                extract=lambda uri: [last_child_of(uri.path), *hostnames_from_query(uri)],
            ),
            PathRule(
                name="query-driven",
                matches=lambda path: path == node_collection or is_child_of(command, path),
                extract=hostnames_from_query,
            ),
        )

    @property
    def rules(self) -> Sequence[PathRule]:
        return self._rules

    def match(self, uri: RequestURI) -> PathRule | None:
        for rule in self._rules:
            if rule.matches(uri.path):
                return rule
        return None

    def hostnames(self, uri: RequestURI) -> tuple[str, ...]:
        rule = self.match(uri)
        if rule is None:
            return ()
        return tuple(rule.extract(uri))


def _optional(value: str | None) -> list[str]:
    return [] if value is None else [value]


# --- Module Notes -----------------------------------------------------------
# Rule order matters only where prefixes overlap: `{nodes}/node/` itself is not a
# strict sub-path of `{nodes}/node/`, so the collection root falls through to the
# query-driven rule.
