from booking_portal import db
from booking_portal.models.booking import Booking, Attachment
from booking_portal.models.message import Message, MessageAttachment

class BookingRepository:
    """
    Queries over bookings and the resources nested under them.

    Every lookup is scoped to the owning user. Nested resources are reached
    through sequential guard clauses (booking -> message -> attachment); the
    first missing link returns None without running the deeper queries.
    """

    def _find_owned_booking(self, booking_id, user_id):
        return Booking.query.filter_by(id=booking_id, user_id=user_id).first()

    def create(self, user_id, title, status, date, description=None):
        booking = Booking(
            user_id=user_id,
            title=title,
            description=description,
            status=status,
            date=date
        )
        db.session.add(booking)
        db.session.commit()
        return booking.to_dict()

    def find_all_by_user_id(self, user_id):
        bookings = Booking.query.filter_by(user_id=user_id) \
            .order_by(Booking.created_at.desc(), Booking.id.desc()).all()
        return [booking.to_dict() for booking in bookings]

    def find_by_id(self, booking_id, user_id):
        booking = self._find_owned_booking(booking_id, user_id)
        return booking.to_detail_dict() if booking else None

    def find_attachment_by_id(self, booking_id, attachment_id, user_id):
        if not self._find_owned_booking(booking_id, user_id):
            return None

        attachment = Attachment.query.filter_by(id=attachment_id, booking_id=booking_id).first()
        return attachment.to_dict() if attachment else None

    def create_message(self, booking_id, user_id, content, attachments=None):
        """Store a message and its attachment metadata in one transaction"""
        if not self._find_owned_booking(booking_id, user_id):
            return None

        message = Message(booking_id=booking_id, user_id=user_id, content=content)
        for attachment in attachments or []:
            message.message_attachments.append(MessageAttachment(
                file_name=attachment['file_name'],
                file_path=attachment['file_path'],
                file_size=attachment['file_size'],
                mime_type=attachment['mime_type']
            ))

        db.session.add(message)
        db.session.commit()
        return message.to_dict()

    def find_message_attachment_by_id(self, booking_id, message_id, attachment_id, user_id):
        if not self._find_owned_booking(booking_id, user_id):
            return None

        message = Message.query.filter_by(id=message_id, booking_id=booking_id).first()
        if not message:
            return None

        attachment = MessageAttachment.query.filter_by(id=attachment_id, message_id=message_id).first()
        return attachment.to_dict() if attachment else None
