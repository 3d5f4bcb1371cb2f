from flask import jsonify

from ..constants.service_code import HTTP_STATUS_CODES, ERROR_MESSAGES
from .logger import Log


# Handle marshmallow ValidationError raised outside of flask-smorest arguments
def handle_validation_error(error):
    Log.info(f"[error_handlers.py][handle_validation_error] {error.messages}")
    response = {
        "error": "Validation Error",
        "message": ERROR_MESSAGES["VALIDATION_FAILED"],
        "errors": error.messages,
        "status_code": HTTP_STATUS_CODES["BAD_REQUEST"],
    }
    return jsonify(response), HTTP_STATUS_CODES["BAD_REQUEST"]

# Handle TypeError
def handle_type_error(error):
    Log.info(f"[error_handlers.py][handle_type_error] {error}")
    response = {
        "error": "Type Error",
        "message": str(error),
        "status_code": HTTP_STATUS_CODES["BAD_REQUEST"],
    }
    return jsonify(response), HTTP_STATUS_CODES["BAD_REQUEST"]
