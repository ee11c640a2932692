import logging
from http import HTTPStatus
from booking_portal.repositories import UserRepository
from booking_portal.utils.responses import ServiceResponse

logger = logging.getLogger(__name__)

class UserService:
    def __init__(self, user_repository=None):
        self.user_repository = user_repository or UserRepository()

    def find_all(self):
        try:
            users = self.user_repository.find_all()
            if not users:
                return ServiceResponse.failure('No Users found', None, HTTPStatus.NOT_FOUND)
            return ServiceResponse.success('Users found', users)
        except Exception as e:
            logger.error(f"Error finding all users: {e}")
            return ServiceResponse.failure(
                'An error occurred while retrieving users.',
                None,
                HTTPStatus.INTERNAL_SERVER_ERROR
            )

    def find_by_id(self, user_id):
        try:
            user = self.user_repository.find_by_id(user_id)
            if not user:
                return ServiceResponse.failure('User not found', None, HTTPStatus.NOT_FOUND)
            return ServiceResponse.success('User found', user)
        except Exception as e:
            logger.error(f"Error finding user with id {user_id}: {e}")
            return ServiceResponse.failure(
                'An error occurred while finding user.',
                None,
                HTTPStatus.INTERNAL_SERVER_ERROR
            )
