"""Request validation against pydantic request schemas"""
from functools import wraps
from http import HTTPStatus
from flask import request
from pydantic import ValidationError
from booking_portal.utils.responses import ServiceResponse, handle_service_response

def _request_body():
    if request.is_json:
        return request.get_json(silent=True) or {}
    # multipart/form-data and urlencoded bodies
    return request.form.to_dict()

def _request_sections(schema):
    sources = {
        'params': lambda: dict(request.view_args or {}),
        'body': _request_body,
        'query': lambda: request.args.to_dict(),
    }
    return {name: sources[name]() for name in schema.model_fields if name in sources}

def format_validation_error(exc):
    """Render the first pydantic error as a single human readable message"""
    error = exc.errors()[0]
    if error.get('type') == 'value_error' and 'error' in error.get('ctx', {}):
        return str(error['ctx']['error'])
    # Drop the request section ('body', 'params', ...) from the location
    field = '.'.join(str(part) for part in error.get('loc', ())[1:])
    return f"{field}: {error['msg']}" if field else error['msg']

def validate_request(schema):
    """
    Decorator validating the request against ``schema`` before the view runs.

    On failure responds 400 with the envelope. On success the parsed schema
    instance is available as ``request.validated``.
    """
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            try:
                validated = schema.model_validate(_request_sections(schema))
            except ValidationError as e:
                service_response = ServiceResponse.failure(
                    f'Invalid input: {format_validation_error(e)}',
                    None,
                    HTTPStatus.BAD_REQUEST
                )
                return handle_service_response(service_response)

            request.validated = validated
            return f(*args, **kwargs)
        return decorated_function
    return decorator
