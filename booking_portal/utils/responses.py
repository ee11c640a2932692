"""Uniform response envelope returned by every service call"""
from http import HTTPStatus
from flask import jsonify

class ServiceResponse:
    """
    Outcome of a service call.

    Serialized as ``{success, message, responseObject, statusCode}`` so that
    clients parse the same shape for success and error paths. ``is_success``
    (serialized as ``success``) is derived from the status code and
    ``responseObject`` is always ``None`` on failure.
    """

    def __init__(self, message, response_object, status_code):
        self.is_success = 200 <= status_code < 300
        self.message = message
        self.response_object = response_object if self.is_success else None
        self.status_code = int(status_code)

    @classmethod
    def success(cls, message, response_object=None, status_code=HTTPStatus.OK):
        if not 200 <= status_code < 300:
            raise ValueError(f'success response needs a 2xx status code, got {status_code}')
        return cls(message, response_object, status_code)

    @classmethod
    def failure(cls, message, response_object=None, status_code=HTTPStatus.BAD_REQUEST):
        if 200 <= status_code < 300:
            raise ValueError(f'failure response needs a non-2xx status code, got {status_code}')
        return cls(message, response_object, status_code)

    def to_dict(self):
        return {
            'success': self.is_success,
            'message': self.message,
            'responseObject': self.response_object,
            'statusCode': self.status_code
        }

    def __repr__(self):
        return f'<ServiceResponse {self.status_code} {self.message!r}>'

def handle_service_response(service_response):
    """Copy the envelope status onto the HTTP response and send the envelope as body"""
    return jsonify(service_response.to_dict()), service_response.status_code
