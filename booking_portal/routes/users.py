from flask import Blueprint, request
from booking_portal.schemas.user import GetUserRequest
from booking_portal.services.user_service import UserService
from booking_portal.utils.auth import require_auth
from booking_portal.utils.responses import handle_service_response
from booking_portal.utils.validation import validate_request

bp = Blueprint('users', __name__)

user_service = UserService()

@bp.route('/', methods=['GET'])
@require_auth
def get_users():
    """
    Get all users
    ---
    tags:
      - User
    security:
      - cookieAuth: []
    responses:
      200:
        description: Users found
      401:
        description: Authentication required
      404:
        description: No Users found
    """
    return handle_service_response(user_service.find_all())

@bp.route('/<id>', methods=['GET'])
@require_auth
@validate_request(GetUserRequest)
def get_user(id):
    """
    Get user by ID
    ---
    tags:
      - User
    parameters:
      - in: path
        name: id
        required: true
        schema:
          type: integer
    security:
      - cookieAuth: []
    responses:
      200:
        description: User found
      400:
        description: Invalid input
      401:
        description: Authentication required
      404:
        description: User not found
    """
    return handle_service_response(user_service.find_by_id(request.validated.params.id))
