import json
import logging
from datetime import datetime, timezone
from flask import jsonify, request
from werkzeug.exceptions import HTTPException
from .exceptions import DeviceInventoryError, DeviceValidationError

logger = logging.getLogger(__name__)

def error_body(status, message, **extra):
    body = {
        'status': status,
        'message': message,
        'timestamp': datetime.now(timezone.utc).isoformat(),
    }
    body.update(extra)
    return body

def register_error_handlers(app):
    app.register_error_handler(DeviceInventoryError, _handle_domain_error)
    app.register_error_handler(HTTPException, _handle_http_error)
    app.register_error_handler(Exception, _handle_unexpected_error)

def _handle_domain_error(exc):
    if exc.status_code >= 500:
        logger.error('%s %s failed: %s', request.method, request.path, exc.message)
    extra = {}
    if isinstance(exc, DeviceValidationError) and exc.errors:
        extra['errors'] = exc.errors
    return jsonify(error_body(exc.status_code, exc.public_message(), **extra)), exc.status_code

def _handle_http_error(exc):
    # keep werkzeug's headers (Allow on 405 and the like), swap the body for JSON
    response = exc.get_response()
    response.data = json.dumps(error_body(exc.code, exc.description))
    response.content_type = 'application/json'
    return response

def _handle_unexpected_error(exc):
    logger.exception('unhandled error on %s %s', request.method, request.path)
    return jsonify(error_body(500, 'An internal server error occurred')), 500
