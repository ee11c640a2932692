from booking_portal import db
from datetime import datetime, timezone

class Message(db.Model):
    """Message in a booking thread"""
    __tablename__ = 'messages'

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    booking_id = db.Column(db.Integer, db.ForeignKey('bookings.id', ondelete='CASCADE'), nullable=False, index=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    content = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    message_attachments = db.relationship('MessageAttachment', backref='message', lazy='select', cascade='all, delete-orphan', order_by='MessageAttachment.id')

    def to_dict(self):
        return {
            'id': self.id,
            'bookingId': self.booking_id,
            'userId': self.user_id,
            'content': self.content,
            'createdAt': self.created_at.isoformat() if self.created_at else None,
            'messageAttachments': [attachment.to_dict() for attachment in self.message_attachments]
        }

    def __repr__(self):
        return f'<Message {self.id}>'

class MessageAttachment(db.Model):
    """File uploaded together with a message"""
    __tablename__ = 'message_attachments'

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    message_id = db.Column(db.Integer, db.ForeignKey('messages.id', ondelete='CASCADE'), nullable=False, index=True)

    file_name = db.Column(db.String(255), nullable=False)
    file_path = db.Column(db.Text, nullable=False)
    file_size = db.Column(db.Integer, nullable=False)
    mime_type = db.Column(db.String(255), nullable=False)

    created_at = db.Column(db.DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    def to_dict(self):
        return {
            'id': self.id,
            'messageId': self.message_id,
            'fileName': self.file_name,
            'filePath': self.file_path,
            'fileSize': self.file_size,
            'mimeType': self.mime_type,
            'createdAt': self.created_at.isoformat() if self.created_at else None
        }

    def __repr__(self):
        return f'<MessageAttachment {self.file_name}>'
