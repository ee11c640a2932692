"""
SQLAlchemy Models Package

This package contains all database models organized by domain:
- Core Models: User, Booking
- Booking-Related: Attachment
- Communication: Message, MessageAttachment
"""

# Core Models
from booking_portal.models.user import User
from booking_portal.models.booking import Booking, Attachment

# Communication Models
from booking_portal.models.message import Message, MessageAttachment

__all__ = [
    # Core Models
    'User',
    'Booking',
    # Booking-Related
    'Attachment',
    # Communication
    'Message',
    'MessageAttachment',
]
