"""
node_authz.authz.uri

Request URI value type.

Responsibilities:
- Hold the decoded path and ordered query parameters of a request.
- Build instances from raw URI strings or incoming Starlette requests.
"""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import unquote

from starlette.datastructures import URL, QueryParams
from starlette.requests import Request


@dataclass(frozen=True, slots=True)
class RequestURI:
    """
    Path plus query parameters of a request.

    `query` keeps every (key, value) pair in request order; keys may repeat.
    """

    path: str
    query: tuple[tuple[str, str], ...] = ()

    @classmethod
    def parse(cls, raw: str) -> RequestURI:
        """Build from a raw URI such as `/nodes/v2/command/reboot?hostname=h1`."""
        url = URL(raw)
        path = unquote(url.path, encoding="utf-8")
        return cls(path=path, query=tuple(QueryParams(url.query).multi_items()))

    @classmethod
    def from_request(cls, request: Request) -> RequestURI:
        return cls(path=request_path(request), query=tuple(request.query_params.multi_items()))

    def values(self, *names: str) -> list[str]:
        """Values of all query parameters whose key is one of `names`, in order."""
        return [value for key, value in self.query if key in names]


def request_path(request: Request) -> str:
    """
    Decoded path the router dispatches on.

    Read from the ASGI scope: `request.url` re-parses the decoded path, which
    truncates it at a decoded `?` or `#` (`%3F`, `%23`).
    """
    return request.scope["path"]


# --- Module Notes -----------------------------------------------------------
# `QueryParams` keeps blank values, so empty `hostname=` parameters reach the
# extractor and are filtered there.
