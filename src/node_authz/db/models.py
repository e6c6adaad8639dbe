"""
node_authz.db.models

Persistence schema for the node inventory.

Responsibilities:
- Define the `Node` table: one row per hostname, optionally pointing at the
  hostname of the node it is hosted on.
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from node_authz.db.base import Base


def _utcnow() -> datetime:
    # Persist naive UTC timestamps for simplicity; production systems may use tz-aware types.
    return datetime.utcnow()


class Node(Base):
    __tablename__ = "nodes"

    hostname: Mapped[str] = mapped_column(String(255), primary_key=True)
    # Deliberately not a foreign key: children may be registered before their parent.
    parent_hostname: Mapped[str | None] = mapped_column(String(255), nullable=True, index=True)

    created_at: Mapped[datetime] = mapped_column(nullable=False, default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(nullable=False, default=_utcnow, onupdate=_utcnow)


# --- Module Notes -----------------------------------------------------------
# Only the parent relation is modeled; node state, flavor, allocation etc. belong
# to the node repository proper.
