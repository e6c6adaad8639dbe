"""
node_authz.api.routers.decisions

Authorization decision endpoint.

Responsibilities:
- Let other services ask for a decision on behalf of a principal and URI.
- Report which rule matched and which hostnames were extracted.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from node_authz.api.deps import authorizer_from_app
from node_authz.auth.deps import get_principal
from node_authz.auth.models import Principal
from node_authz.authz.authorizer import Authorizer
from node_authz.authz.uri import RequestURI
from node_authz.observability.logging import get_logger

log = get_logger(__name__)

router = APIRouter(prefix="/authz/v1", tags=["authz"])


class DecisionRequest(BaseModel):
    principal: str = Field(min_length=1)
    uri: str = Field(min_length=1, examples=["/nodes/v2/node/host1.example.com"])


class DecisionResponse(BaseModel):
    allowed: bool
    rule: str | None = None
    hostnames: list[str] = Field(default_factory=list)


@router.post("/decision", response_model=DecisionResponse)
async def decide(
    body: DecisionRequest,
    authorizer: Authorizer = Depends(authorizer_from_app),
    caller: Principal = Depends(get_principal),
) -> DecisionResponse:
    uri = RequestURI.parse(body.uri)
    rule = authorizer.extractor.match(uri)
    hostnames = rule.extract(uri) if rule is not None else []
    allowed = await authorizer.is_authorized(Principal(name=body.principal), uri)
    log.debug(
        "decision_requested", caller=caller.name, principal=body.principal, allowed=allowed
    )
    return DecisionResponse(
        allowed=allowed,
        rule=rule.name if rule is not None else None,
        hostnames=hostnames,
    )


# --- Module Notes -----------------------------------------------------------
# `/authz/v1/` matches no extraction rule, so only the trusted service gets
# past the middleware to this endpoint.
