import logging
from http import HTTPStatus
from werkzeug.security import check_password_hash
from booking_portal.repositories import UserRepository
from booking_portal.utils.responses import ServiceResponse

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = 'Invalid email or password'

class LoginService:
    def __init__(self, user_repository=None):
        self.user_repository = user_repository or UserRepository()

    def login(self, email, password):
        try:
            user = self.user_repository.find_by_email(email)
            # Same message for unknown email and wrong password
            if not user or not check_password_hash(user['password'], password):
                return ServiceResponse.failure(INVALID_CREDENTIALS, None, HTTPStatus.UNAUTHORIZED)

            login_response = {
                'id': user['id'],
                'name': user['name'],
                'email': user['email'],
                'phone_number': user['phone_number']
            }
            return ServiceResponse.success('Login successful', login_response, HTTPStatus.OK)
        except Exception as e:
            logger.error(f"Error during login: {e}")
            return ServiceResponse.failure(
                'An error occurred during login.',
                None,
                HTTPStatus.INTERNAL_SERVER_ERROR
            )
