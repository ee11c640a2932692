from flask import Blueprint, request
from booking_portal.schemas.user import RegisterRequest
from booking_portal.services.registration_service import RegistrationService
from booking_portal.utils.auth import start_session
from booking_portal.utils.responses import handle_service_response
from booking_portal.utils.validation import validate_request

bp = Blueprint('registration', __name__)

registration_service = RegistrationService()

@bp.route('/', methods=['POST'])
@validate_request(RegisterRequest)
def register():
    """
    Register a new user and start a session
    ---
    tags:
      - Registration
    requestBody:
      required: true
      content:
        application/json:
          schema:
            type: object
            required:
              - name
              - email
              - phone_number
              - password
            properties:
              name:
                type: string
              email:
                type: string
                format: email
              phone_number:
                type: string
              password:
                type: string
                minLength: 6
    responses:
      201:
        description: User registered successfully
      400:
        description: Invalid input
      409:
        description: User with this email already exists
    """
    body = request.validated.body
    service_response = registration_service.register(
        name=body.name,
        email=body.email,
        password=body.password,
        phone_number=body.phone_number
    )

    if service_response.is_success:
        start_session(service_response.response_object)

    return handle_service_response(service_response)
