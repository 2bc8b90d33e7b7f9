# janseva/normalizers/audit.py
from __future__ import annotations

from typing import Dict, Any
from janseva.models.audit_log import AuditLog


def normalize_audit_log(log: AuditLog) -> Dict[str, Any]:
    """
    Normalizes an AuditLog model into API-safe JSON.
    """
    return {
        "id": log.id,
        "actor_id": log.actor_id,
        "action": log.action,
        "entity_type": log.entity_type,
        "entity_id": log.entity_id,
        "payload": log.payload or {},
        "created_at": log.created_at.isoformat() if log.created_at else None,
    }
