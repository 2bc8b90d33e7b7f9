from flask import request, jsonify
from flask_jwt_extended import (
    create_access_token,
    create_refresh_token,
    get_jwt,
    get_jwt_identity,
    jwt_required,
)
from janseva.domain.errors import Unauthorized, ValidationFailure
from janseva.extensions import db
from janseva.models.user import User
from janseva.utils.decorators import current_session, login_required
from . import v1_bp


def _issue_tokens(user: User) -> dict:
    claims = {"role": user.role}
    return {
        "access_token": create_access_token(identity=str(user.id), additional_claims=claims),
        "refresh_token": create_refresh_token(identity=str(user.id), additional_claims=claims),
    }


@v1_bp.route("/auth/login", methods=["POST"])
def login():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationFailure("Invalid request body")

    email = data.get("email")
    password = data.get("password")

    if not email or not password:
        raise ValidationFailure("Email and password required")

    user = User.query.filter_by(email=email).first()

    if not user or not user.check_password(password):
        raise Unauthorized("Invalid credentials")

    if not user.is_active:
        raise Unauthorized.forbidden("User account disabled")

    return jsonify(_issue_tokens(user)), 200


@v1_bp.route("/auth/refresh", methods=["POST"])
@jwt_required(refresh=True)
def refresh():
    identity = get_jwt_identity()
    access_token = create_access_token(
        identity=identity,
        additional_claims={"role": get_jwt().get("role", "")},
    )
    return jsonify({"access_token": access_token}), 200


@v1_bp.route("/auth/me", methods=["GET"])
@login_required
def me():
    session = current_session()
    user = db.session.get(User, session["user_id"])
    if user is None or not user.is_active:
        raise Unauthorized("User no longer exists")

    return jsonify({
        "id": user.id,
        "email": user.email,
        "name": user.name,
        "role": user.role,
    }), 200
