from booking_portal import db
from datetime import datetime, timezone

DEFAULT_BOOKING_STATUS = 'Work Order'

class Booking(db.Model):
    """Booking owned by a single user"""
    __tablename__ = 'bookings'

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True)

    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text)
    # Free text, mirrored to the ServiceM8 job status
    status = db.Column(db.String(100), nullable=False, default=DEFAULT_BOOKING_STATUS)
    date = db.Column(db.DateTime(timezone=True), nullable=False)

    # Timestamps
    created_at = db.Column(db.DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at = db.Column(db.DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    # Relationships
    attachments = db.relationship('Attachment', backref='booking', lazy='select', cascade='all, delete', order_by='Attachment.id')
    messages = db.relationship('Message', backref='booking', lazy='select', cascade='all, delete', order_by='Message.id')

    def to_dict(self):
        return {
            'id': self.id,
            'userId': self.user_id,
            'title': self.title,
            'description': self.description,
            'status': self.status,
            'date': self.date.isoformat() if self.date else None,
            'createdAt': self.created_at.isoformat() if self.created_at else None,
            'updatedAt': self.updated_at.isoformat() if self.updated_at else None
        }

    def to_detail_dict(self):
        """Booking with its attachments and message thread"""
        data = self.to_dict()
        data['attachments'] = [attachment.to_dict() for attachment in self.attachments]
        data['messages'] = [message.to_dict() for message in self.messages]
        return data

    def __repr__(self):
        return f'<Booking {self.id}>'

class Attachment(db.Model):
    """File attached directly to a booking"""
    __tablename__ = 'attachments'

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    booking_id = db.Column(db.Integer, db.ForeignKey('bookings.id', ondelete='CASCADE'), nullable=False, index=True)

    file_name = db.Column(db.String(255), nullable=False)
    file_path = db.Column(db.Text, nullable=False)
    file_size = db.Column(db.Integer, nullable=False)
    mime_type = db.Column(db.String(255), nullable=False)

    created_at = db.Column(db.DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    def to_dict(self):
        return {
            'id': self.id,
            'bookingId': self.booking_id,
            'fileName': self.file_name,
            'filePath': self.file_path,
            'fileSize': self.file_size,
            'mimeType': self.mime_type,
            'createdAt': self.created_at.isoformat() if self.created_at else None
        }

    def __repr__(self):
        return f'<Attachment {self.file_name}>'
