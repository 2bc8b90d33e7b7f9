from flask import request, jsonify
from janseva.models.audit_log import AuditLog
from janseva.normalizers.audit import normalize_audit_log
from janseva.normalizers.pagination import normalize_pagination
from janseva.utils.decorators import roles_required
from janseva.utils.pagination import paginate_cursor, parse_limit
from . import v1_bp


@v1_bp.route("/admin/audit", methods=["GET"])
@roles_required("SUPER_ADMIN")
def list_audit_logs():
    limit = parse_limit(request.args.get("limit"))

    query = AuditLog.query

    # Optional filters
    if action := request.args.get("action"):
        query = query.filter(AuditLog.action == action)

    if entity_type := request.args.get("entity_type"):
        query = query.filter(AuditLog.entity_type == entity_type)

    if entity_id := request.args.get("entity_id"):
        query = query.filter(AuditLog.entity_id == entity_id)

    logs, cursor = paginate_cursor(
        query,
        model=AuditLog,
        limit=limit,
        cursor=request.args.get("cursor"),
    )

    return jsonify(normalize_pagination(logs, normalize_audit_log, cursor=cursor))
