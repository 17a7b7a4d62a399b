# macim/core/errors.py

from flask import jsonify, request, current_app
from werkzeug.exceptions import HTTPException, NotFound, MethodNotAllowed

class ApiError(Exception):
    """Base class for errors rendered as {"ok": false, "error": code}."""
    status = 500
    default_code = 'server_error'

    def __init__(self, code=None, status=None):
        self.code = code or self.default_code
        if status is not None:
            self.status = status
        super().__init__(self.code)

class ValidationError(ApiError):
    status = 400
    default_code = 'missing_fields'

class AuthError(ApiError):
    status = 401
    default_code = 'unauthorized'

class NotFoundError(ApiError):
    # Also raised when the row exists but belongs to someone else.
    status = 404
    default_code = 'not_found'

class ConflictError(ApiError):
    status = 409
    default_code = 'conflict'

class StorageError(ApiError):
    status = 500
    default_code = 'db_error'

def register_error_handlers(app):
    @app.errorhandler(ApiError)
    def handle_api_error(error):
        return jsonify({'ok': False, 'error': error.code}), error.status

    @app.errorhandler(NotFound)
    def handle_not_found(error):
        return jsonify({
            'ok': False,
            'error': 'not_found',
            'path': request.path,
            'method': request.method,
        }), 404

    @app.errorhandler(MethodNotAllowed)
    def handle_method_not_allowed(error):
        return jsonify({'ok': False, 'error': 'method_not_allowed'}), 405

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        # e.g. a malformed JSON body
        return jsonify({'ok': False, 'error': 'bad_request' if error.code == 400 else 'http_error'}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected(error):
        current_app.logger.exception("Uncaught error on %s %s", request.method, request.path)
        return jsonify({'ok': False, 'error': 'server_error'}), 500
