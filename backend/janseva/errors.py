from flask import current_app, jsonify
from werkzeug.exceptions import HTTPException
from janseva.domain.errors import CmsError, StoreFailure, Unauthorized
from janseva.extensions import jwt


def _error_response(error: CmsError):
    response = jsonify(error.to_dict())
    response.status_code = error.status_code
    return response


def register_error_handlers(app):
    @app.errorhandler(CmsError)
    def handle_cms_error(error):
        return _error_response(error)

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        response = jsonify({
            "error": error.name.replace(" ", ""),
            "message": error.description,
        })
        response.status_code = error.code or 500
        return response

    @app.errorhandler(Exception)
    def handle_unexpected(error):
        current_app.logger.exception("Unhandled error: %s", error)
        return _error_response(StoreFailure())


@jwt.unauthorized_loader
def handle_missing_token(reason):
    return _error_response(Unauthorized(reason))


@jwt.invalid_token_loader
def handle_invalid_token(reason):
    return _error_response(Unauthorized(reason))


@jwt.expired_token_loader
def handle_expired_token(jwt_header, jwt_payload):
    return _error_response(Unauthorized("Token has expired"))
