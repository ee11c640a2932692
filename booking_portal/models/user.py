from booking_portal import db
from uuid import uuid4
from datetime import datetime, timezone

class User(db.Model):
    """Registered customer; one row per email address"""
    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)

    # External identity shared with ServiceM8 (company uuid)
    uuid = db.Column(db.String(36), unique=True, nullable=False, default=lambda: str(uuid4()))

    # Profile Info
    name = db.Column(db.String(255), nullable=False)
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    password = db.Column(db.String(255), nullable=False)
    phone_number = db.Column(db.String(50), nullable=False)

    # Timestamps
    created_at = db.Column(db.DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at = db.Column(db.DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    # Relationships
    bookings = db.relationship('Booking', backref='user', lazy='dynamic', cascade='all, delete')
    messages = db.relationship('Message', backref='author', lazy='dynamic', cascade='all, delete')

    def to_dict(self, include_password=False):
        data = {
            'id': self.id,
            'uuid': self.uuid,
            'name': self.name,
            'email': self.email,
            'phone_number': self.phone_number,
            'createdAt': self.created_at.isoformat() if self.created_at else None,
            'updatedAt': self.updated_at.isoformat() if self.updated_at else None
        }
        # Only the login lookup needs the hash
        if include_password:
            data['password'] = self.password
        return data

    def __repr__(self):
        return f'<User {self.email}>'
