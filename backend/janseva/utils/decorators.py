from functools import wraps
from typing import Optional, TypedDict

from flask_jwt_extended import get_jwt, get_jwt_identity, verify_jwt_in_request

from janseva.domain.errors import Unauthorized
from janseva.application.cms.settings import is_feature_enabled


class Session(TypedDict):
    user_id: int
    role: str


def current_session() -> Optional[Session]:
    """
    The authenticated admin for this request, or None for anonymous callers.
    """
    if verify_jwt_in_request(optional=True) is None:
        return None

    identity = get_jwt_identity()
    if identity is None:
        return None

    return {"user_id": int(identity), "role": get_jwt().get("role", "")}


def login_required(fn):
    @wraps(fn)
    def wrapper(*args, **kwargs):
        if current_session() is None:
            raise Unauthorized("Authentication required")
        return fn(*args, **kwargs)
    return wrapper


def roles_required(*allowed_roles):
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            session = current_session()
            if session is None:
                raise Unauthorized("Authentication required")

            if session["role"] not in allowed_roles:
                raise Unauthorized.forbidden()

            return fn(*args, **kwargs)
        return wrapper
    return decorator


def feature_enabled(feature_name):
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            if not is_feature_enabled(feature_name):
                raise Unauthorized.forbidden(f"Feature '{feature_name}' is disabled")

            return fn(*args, **kwargs)
        return wrapper
    return decorator
