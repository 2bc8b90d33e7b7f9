from flask import request, jsonify
from janseva.application.cms.settings import get_settings, upsert_settings
from janseva.models.user import ROLES
from janseva.utils.decorators import current_session, roles_required
from . import v1_bp


@v1_bp.route("/admin/settings", methods=["GET"])
@roles_required(*ROLES)
def list_settings():
    return jsonify(get_settings(prefix=request.args.get("prefix") or None))


@v1_bp.route("/admin/settings", methods=["POST"])
@roles_required(*ROLES)
def save_settings():
    # body is { key: value, key2: value2 }
    saved = upsert_settings(
        actor_id=current_session()["user_id"],
        values=request.get_json(silent=True),
    )
    return jsonify({"message": "Settings updated successfully", "settings": saved}), 200
