"""
node_authz.db

Persistence package (SQLAlchemy async) backing the node inventory.

Responsibilities:
- Provide ORM models, engine/session setup, and repositories.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The authorizer never imports from here directly; it sees the inventory through
# `node_authz.inventory.sql.SqlNodeInventory`.
