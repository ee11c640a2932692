import logging
from http import HTTPStatus
from booking_portal import db
from booking_portal.repositories import BookingRepository, UserRepository
from booking_portal.utils.helpers import parse_iso_datetime
from booking_portal.utils.responses import ServiceResponse
from booking_portal.utils.servicem8 import servicem8_client

logger = logging.getLogger(__name__)

def _internal_error(action, e):
    db.session.rollback()
    logger.error(f"Error {action}: {e}")
    return ServiceResponse.failure(
        f'An error occurred while {action}.',
        None,
        HTTPStatus.INTERNAL_SERVER_ERROR
    )

class BookingService:
    def __init__(self, booking_repository=None, user_repository=None, crm_client=None):
        self.booking_repository = booking_repository or BookingRepository()
        self.user_repository = user_repository or UserRepository()
        self.crm_client = crm_client or servicem8_client

    def get_bookings_by_user_id(self, user_id):
        try:
            bookings = self.booking_repository.find_all_by_user_id(user_id)
            return ServiceResponse.success('Bookings retrieved successfully', bookings)
        except Exception as e:
            return _internal_error('retrieving bookings', e)

    def create_booking(self, user_id, title, date, status, description=None):
        """``date`` is the client's ISO string; it is stored parsed and sent to ServiceM8 as given"""
        try:
            # The user's uuid doubles as the ServiceM8 company uuid
            user = self.user_repository.find_by_id(user_id)
            if not user:
                return ServiceResponse.failure('User not found', None, HTTPStatus.NOT_FOUND)

            booking = self.booking_repository.create(
                user_id=user_id,
                title=title,
                description=description,
                status=status,
                date=parse_iso_datetime(date)
            )
        except Exception as e:
            return _internal_error('creating the booking', e)

        self._sync_job(booking, status, date, user['uuid'])
        return ServiceResponse.success('Booking created successfully', booking, HTTPStatus.CREATED)

    def _sync_job(self, booking, status, date, company_uuid):
        """Create the ServiceM8 job; the booking row is already committed"""
        try:
            job = self.crm_client.create_job(status=status, date=date, company_uuid=company_uuid)
        except Exception as e:
            logger.error(f"Unexpected ServiceM8 failure for booking {booking['id']}: {e}")
            job = None

        if job is not None:
            logger.info(f"ServiceM8 job created for booking {booking['id']}")
        else:
            logger.warning(f"Failed to create ServiceM8 job for booking {booking['id']}")

    def get_booking_by_id(self, booking_id, user_id):
        try:
            booking = self.booking_repository.find_by_id(booking_id, user_id)
            if not booking:
                return ServiceResponse.failure('Booking not found', None, HTTPStatus.NOT_FOUND)
            return ServiceResponse.success('Booking retrieved successfully', booking)
        except Exception as e:
            return _internal_error('retrieving the booking', e)

    def get_attachment(self, booking_id, attachment_id, user_id):
        try:
            attachment = self.booking_repository.find_attachment_by_id(booking_id, attachment_id, user_id)
            if not attachment:
                return ServiceResponse.failure('Attachment not found', None, HTTPStatus.NOT_FOUND)
            return ServiceResponse.success('Attachment retrieved successfully', attachment)
        except Exception as e:
            return _internal_error('retrieving the attachment', e)

    def create_message(self, booking_id, user_id, content, attachments=None):
        try:
            message = self.booking_repository.create_message(booking_id, user_id, content, attachments)
            if not message:
                return ServiceResponse.failure(
                    "Booking not found or you don't have permission to add messages",
                    None,
                    HTTPStatus.NOT_FOUND
                )
            return ServiceResponse.success('Message created successfully', message, HTTPStatus.CREATED)
        except Exception as e:
            return _internal_error('creating the message', e)

    def get_message_attachment(self, booking_id, message_id, attachment_id, user_id):
        try:
            attachment = self.booking_repository.find_message_attachment_by_id(
                booking_id, message_id, attachment_id, user_id
            )
            if not attachment:
                return ServiceResponse.failure('Message attachment not found', None, HTTPStatus.NOT_FOUND)
            return ServiceResponse.success('Message attachment retrieved successfully', attachment)
        except Exception as e:
            return _internal_error('retrieving the message attachment', e)
