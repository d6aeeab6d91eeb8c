from flask import jsonify, render_template, request
from pydantic import ValidationError
from werkzeug.exceptions import HTTPException
from portfolio.domain.exceptions import DomainError

VALUE_ERROR_PREFIX = "Value error, "


def _wants_json():
    return request.path.startswith("/api/")


def _field_errors(error: ValidationError):
    fields = {}
    for item in error.errors():
        name = ".".join(str(part) for part in item["loc"]) or "__root__"
        message = item["msg"]
        if message.startswith(VALUE_ERROR_PREFIX):
            message = message[len(VALUE_ERROR_PREFIX):]
        fields.setdefault(name, message)
    return fields


def register_error_handlers(app):
    @app.errorhandler(DomainError)
    def handle_domain_error(error):
        response = jsonify({
            "error": type(error).__name__,
            "message": str(error)
        })
        response.status_code = error.status_code
        return response

    @app.errorhandler(ValidationError)
    def handle_validation_error(error):
        response = jsonify({
            "error": "ValidationError",
            "fields": _field_errors(error)
        })
        response.status_code = 422
        return response

    @app.errorhandler(404)
    def handle_not_found(error):
        if _wants_json():
            return jsonify({"error": "NotFound", "message": "Resource not found"}), 404
        return render_template("404.html"), 404

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        if not _wants_json():
            return error
        response = jsonify({
            "error": error.name.replace(" ", ""),
            "message": error.description
        })
        response.status_code = error.code
        return response
