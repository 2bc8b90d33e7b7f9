from flask import request, jsonify
from janseva.application.cms.render_page import render_page as render_page_op
from janseva.application.cms.resolve_typography import (
    resolve_typography,
    typography_css_variables,
)
from janseva.application.cms.settings import get_public_settings
from janseva.renderers.locale import normalize_locale
from . import v1_bp


@v1_bp.route("/public/<locale>/pages/<path:slug>", methods=["GET"])
def render_page(locale, slug):
    return jsonify(render_page_op(slug=slug, locale=normalize_locale(locale)))


@v1_bp.route("/public/typography", methods=["GET"])
def get_typography():
    resolved = resolve_typography(request.args.get("slug") or None)
    return jsonify({
        "values": resolved,
        "css_variables": typography_css_variables(resolved),
    })


@v1_bp.route("/public/settings", methods=["GET"])
def get_site_settings():
    return jsonify(get_public_settings())
