"""Request logging, security headers and centralized error handlers"""
import time
from http import HTTPStatus
from flask import g, request, current_app
from flask_limiter.errors import RateLimitExceeded
from werkzeug.exceptions import HTTPException, RequestEntityTooLarge
from booking_portal.utils.responses import ServiceResponse, handle_service_response

def register_request_hooks(app):
    """Log one line per request and add security headers to every response"""

    @app.before_request
    def start_timer():
        g.request_started_at = time.perf_counter()

    @app.after_request
    def log_request(response):
        started_at = g.get('request_started_at')
        duration_ms = (time.perf_counter() - started_at) * 1000 if started_at else 0.0
        current_app.logger.info(
            f"{request.method} {request.full_path.rstrip('?')} {response.status_code} "
            f"{duration_ms:.1f}ms"
        )

        response.headers.setdefault('X-Content-Type-Options', 'nosniff')
        response.headers.setdefault('X-Frame-Options', 'SAMEORIGIN')
        response.headers.setdefault('Referrer-Policy', 'no-referrer')
        if current_app.config.get('SESSION_COOKIE_SECURE'):
            response.headers.setdefault('Strict-Transport-Security', 'max-age=15552000; includeSubDomains')
        return response

def register_error_handlers(app):
    """Render framework-level errors with the same envelope the services use"""

    @app.errorhandler(RateLimitExceeded)
    def handle_rate_limit(e):
        return handle_service_response(
            ServiceResponse.failure('Too many requests, please try again later.', None, HTTPStatus.TOO_MANY_REQUESTS)
        )

    @app.errorhandler(RequestEntityTooLarge)
    def handle_too_large(e):
        return handle_service_response(
            ServiceResponse.failure('Request body is too large', None, HTTPStatus.REQUEST_ENTITY_TOO_LARGE)
        )

    @app.errorhandler(HTTPException)
    def handle_http_exception(e):
        message = 'Not Found' if e.code == HTTPStatus.NOT_FOUND else (e.description or e.name)
        return handle_service_response(ServiceResponse.failure(message, None, e.code))

    @app.errorhandler(Exception)
    def handle_unexpected(e):
        current_app.logger.exception(f"Unhandled error on {request.method} {request.path}: {e}")
        return handle_service_response(
            ServiceResponse.failure('An unexpected error occurred', None, HTTPStatus.INTERNAL_SERVER_ERROR)
        )
