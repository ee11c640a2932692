import logging
from http import HTTPStatus
from sqlalchemy.exc import IntegrityError
from werkzeug.security import generate_password_hash
from booking_portal import db
from booking_portal.repositories import UserRepository
from booking_portal.utils.responses import ServiceResponse
from booking_portal.utils.servicem8 import servicem8_client

logger = logging.getLogger(__name__)

class RegistrationService:
    def __init__(self, user_repository=None, crm_client=None):
        self.user_repository = user_repository or UserRepository()
        self.crm_client = crm_client or servicem8_client

    def register(self, name, email, password, phone_number):
        try:
            if self.user_repository.find_by_email(email):
                return ServiceResponse.failure(
                    'User with this email already exists',
                    None,
                    HTTPStatus.CONFLICT
                )

            user = self.user_repository.create(
                name=name,
                email=email,
                password=generate_password_hash(password),
                phone_number=phone_number
            )
        except IntegrityError:
            # Lost a race with a concurrent registration for the same email
            db.session.rollback()
            return ServiceResponse.failure(
                'User with this email already exists',
                None,
                HTTPStatus.CONFLICT
            )
        except Exception as e:
            db.session.rollback()
            logger.error(f"Error during registration: {e}")
            return ServiceResponse.failure(
                'An error occurred during registration.',
                None,
                HTTPStatus.INTERNAL_SERVER_ERROR
            )

        self._sync_company(user)
        return ServiceResponse.success('User registered successfully', user, HTTPStatus.CREATED)

    def _sync_company(self, user):
        """Create the ServiceM8 company; the user row is already committed"""
        try:
            company = self.crm_client.create_client(name=user['name'], uuid=user['uuid'])
        except Exception as e:
            logger.error(f"Unexpected ServiceM8 failure for user {user['email']}: {e}")
            company = None

        if company is not None:
            logger.info(f"ServiceM8 company created for user: {user['email']}")
        else:
            logger.warning(f"Failed to create ServiceM8 company for user: {user['email']}")
