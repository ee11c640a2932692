from http import HTTPStatus
from flask import Blueprint, request
from booking_portal.schemas.user import LoginRequest
from booking_portal.services.login_service import LoginService
from booking_portal.utils.auth import start_session, end_session, get_current_principal, session_snapshot
from booking_portal.utils.responses import ServiceResponse, handle_service_response
from booking_portal.utils.validation import validate_request

bp = Blueprint('login', __name__)

login_service = LoginService()

@bp.route('/', methods=['POST'])
@validate_request(LoginRequest)
def login():
    """
    Log in with email and password
    ---
    tags:
      - Authentication
    requestBody:
      required: true
      content:
        application/json:
          schema:
            type: object
            required:
              - email
              - password
            properties:
              email:
                type: string
                format: email
              password:
                type: string
    responses:
      200:
        description: Login successful, session cookie set
      400:
        description: Invalid input
      401:
        description: Invalid email or password
    """
    body = request.validated.body
    service_response = login_service.login(email=body.email, password=body.password)

    if service_response.is_success:
        start_session(service_response.response_object)

    return handle_service_response(service_response)

@bp.route('/logout', methods=['POST'])
def logout():
    """
    Destroy the current session
    ---
    tags:
      - Authentication
    responses:
      200:
        description: Logout successful
    """
    end_session()
    return handle_service_response(ServiceResponse.success('Logout successful'))

@bp.route('/session', methods=['GET'])
def check_session():
    """
    Return the session snapshot of the logged in user
    ---
    tags:
      - Authentication
    security:
      - cookieAuth: []
    responses:
      200:
        description: User is authenticated
      401:
        description: User is not authenticated
    """
    principal = get_current_principal()
    if not principal:
        return handle_service_response(
            ServiceResponse.failure('User is not authenticated', None, HTTPStatus.UNAUTHORIZED)
        )
    return handle_service_response(
        ServiceResponse.success('User is authenticated', session_snapshot(principal))
    )
