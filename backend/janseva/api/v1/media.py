from flask import request, jsonify
from janseva.domain.errors import NotFound, StoreFailure
from janseva.models.user import ROLES
from janseva.utils.audit import log_action
from janseva.utils.decorators import current_session, feature_enabled, roles_required
from janseva.utils.media import delete_file, store_file
from janseva.utils.transaction import transactional
from . import v1_bp


@v1_bp.route("/admin/media", methods=["POST"])
@roles_required(*ROLES)
@feature_enabled("media_uploads")
def upload_media():
    stored = store_file(request.files.get("file"))

    try:
        with transactional():
            log_action(
                action="media.upload",
                entity_type="media",
                entity_id=stored["url"].rsplit("/", 1)[-1],
                actor_id=current_session()["user_id"],
                payload={"size": stored["size"], "mime_type": stored["mime_type"]},
            )
    except StoreFailure:
        # Unaudited uploads are not kept.
        delete_file(stored["url"])
        raise

    return jsonify(stored), 201


@v1_bp.route("/admin/media/<filename>", methods=["DELETE"])
@roles_required(*ROLES)
@feature_enabled("media_uploads")
def delete_media(filename):
    if not delete_file(filename):
        raise NotFound("File not found")

    with transactional():
        log_action(
            action="media.delete",
            entity_type="media",
            entity_id=filename,
            actor_id=current_session()["user_id"],
        )

    return jsonify({"message": "File deleted"}), 200
