# janseva/api/v1/cms.py
from flask import request, jsonify
from janseva.application.cms.create_page import create_page as create_page_op
from janseva.application.cms.delete_page import delete_page as delete_page_op
from janseva.application.cms.list_pages import list_pages as list_pages_op
from janseva.application.cms.move_section import (
    move_section as move_section_op,
    renumber_sections as renumber_sections_op,
)
from janseva.application.cms.render_page import ordered_sections, preview_page as preview_page_op
from janseva.application.cms.sections import (
    create_section as create_section_op,
    delete_section as delete_section_op,
    update_section as update_section_op,
)
from janseva.application.cms.update_page import (
    get_page_or_404,
    set_page_published,
    update_page as update_page_op,
)
from janseva.domain.errors import ValidationFailure
from janseva.domain.templates import list_templates
from janseva.models.user import ROLES
from janseva.normalizers.page import normalize_page
from janseva.normalizers.pagination import normalize_pagination
from janseva.normalizers.section import normalize_section
from janseva.utils.decorators import current_session, feature_enabled, roles_required
from janseva.utils.pagination import parse_limit
from . import v1_bp


def _json_body():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationFailure("Request body must be a JSON object")
    return data


def _actor_id():
    return current_session()["user_id"]


def _parse_bool(raw):
    if raw is None:
        return None
    if raw.lower() in ("1", "true", "yes"):
        return True
    if raw.lower() in ("0", "false", "no"):
        return False
    raise ValidationFailure("Expected a boolean query parameter", fields={"published": "invalid"})


# ------------------------
# Templates
# ------------------------

@v1_bp.route("/admin/templates", methods=["GET"])
@roles_required(*ROLES)
@feature_enabled("cms")
def list_page_templates():
    return jsonify([t.to_dict() for t in list_templates()])


# ------------------------
# Pages
# ------------------------

@v1_bp.route("/admin/pages", methods=["GET"])
@roles_required(*ROLES)
@feature_enabled("cms")
def list_pages():
    limit = parse_limit(request.args.get("limit"))
    published = _parse_bool(request.args.get("published"))

    pages, cursor = list_pages_op(
        limit=limit,
        cursor=request.args.get("cursor"),
        published=published,
    )

    return jsonify(normalize_pagination(pages, normalize_page, cursor=cursor))


@v1_bp.route("/admin/pages", methods=["POST"])
@roles_required(*ROLES)
@feature_enabled("cms")
def create_page():
    data = _json_body()

    page = create_page_op(
        actor_id=_actor_id(),
        data=data,
        template_id=data.get("template"),
    )

    return jsonify(normalize_page(page, sections=ordered_sections(page.id, visible_only=False))), 201


@v1_bp.route("/admin/pages/<int:page_id>", methods=["GET"])
@roles_required(*ROLES)
@feature_enabled("cms")
def get_page(page_id):
    page = get_page_or_404(page_id)
    return jsonify(normalize_page(page, sections=ordered_sections(page.id, visible_only=False)))


@v1_bp.route("/admin/pages/<int:page_id>", methods=["PATCH"])
@roles_required(*ROLES)
@feature_enabled("cms")
def update_page(page_id):
    page = update_page_op(page_id=page_id, actor_id=_actor_id(), data=_json_body())
    return jsonify(normalize_page(page)), 200


@v1_bp.route("/admin/pages/<int:page_id>/publish", methods=["POST"])
@roles_required(*ROLES)
@feature_enabled("cms")
def publish_page(page_id):
    page = set_page_published(page_id=page_id, actor_id=_actor_id(), published=True)
    return jsonify(normalize_page(page)), 200


@v1_bp.route("/admin/pages/<int:page_id>/unpublish", methods=["POST"])
@roles_required(*ROLES)
@feature_enabled("cms")
def unpublish_page(page_id):
    page = set_page_published(page_id=page_id, actor_id=_actor_id(), published=False)
    return jsonify(normalize_page(page)), 200


@v1_bp.route("/admin/pages/<int:page_id>", methods=["DELETE"])
@roles_required("SUPER_ADMIN")
@feature_enabled("cms")
def delete_page(page_id):
    delete_page_op(page_id=page_id, actor_id=_actor_id())
    return jsonify({"message": "Page deleted successfully"}), 200


@v1_bp.route("/admin/pages/<int:page_id>/preview", methods=["GET"])
@roles_required(*ROLES)
@feature_enabled("cms")
def preview_page(page_id):
    return jsonify(preview_page_op(page_id=page_id, locale=request.args.get("locale")))


# ------------------------
# Sections
# ------------------------

@v1_bp.route("/admin/pages/<int:page_id>/sections", methods=["GET"])
@roles_required(*ROLES)
@feature_enabled("cms")
def list_sections(page_id):
    page = get_page_or_404(page_id)
    return jsonify([
        normalize_section(s, admin=True)
        for s in ordered_sections(page.id, visible_only=False)
    ])


@v1_bp.route("/admin/pages/<int:page_id>/sections", methods=["POST"])
@roles_required(*ROLES)
@feature_enabled("cms")
def create_section(page_id):
    data = _json_body()

    section = create_section_op(
        page_id=page_id,
        actor_id=_actor_id(),
        section_type=data.get("type"),
        content=data.get("content"),
    )

    return jsonify(normalize_section(section, admin=True)), 201


@v1_bp.route("/admin/pages/<int:page_id>/sections/renumber", methods=["POST"])
@roles_required(*ROLES)
@feature_enabled("cms")
def renumber_sections(page_id):
    changed = renumber_sections_op(page_id=page_id, actor_id=_actor_id())
    return jsonify({"changed": changed}), 200


@v1_bp.route("/admin/sections/<int:section_id>", methods=["PATCH"])
@roles_required(*ROLES)
@feature_enabled("cms")
def update_section(section_id):
    section = update_section_op(section_id=section_id, actor_id=_actor_id(), data=_json_body())
    return jsonify(normalize_section(section, admin=True)), 200


@v1_bp.route("/admin/sections/<int:section_id>", methods=["DELETE"])
@roles_required(*ROLES)
@feature_enabled("cms")
def delete_section(section_id):
    delete_section_op(section_id=section_id, actor_id=_actor_id())
    return jsonify({"message": "Section deleted"}), 200


@v1_bp.route("/admin/sections/<int:section_id>/move", methods=["POST"])
@roles_required(*ROLES)
@feature_enabled("cms")
def move_section(section_id):
    data = _json_body()

    moved = move_section_op(
        section_id=section_id,
        direction=data.get("direction"),
        actor_id=_actor_id(),
    )

    return jsonify({"message": "Moved successfully", "moved": moved}), 200
