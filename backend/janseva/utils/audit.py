from typing import Any, Optional

from janseva.extensions import db
from janseva.models.audit_log import AuditLog


def log_action(
    *,
    action: str,
    entity_type: str,
    entity_id: Any,
    actor_id: Optional[Any] = None,
    payload: dict | None = None
) -> AuditLog:
    """Add an audit row to the current session; committed with the caller's transaction."""
    log = AuditLog()

    log.actor_id = str(actor_id) if actor_id is not None else None
    log.action = action
    log.entity_type = entity_type
    log.entity_id = str(entity_id)
    log.payload = payload or {}

    db.session.add(log)
    return log
