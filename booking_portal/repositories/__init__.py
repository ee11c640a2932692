"""
Data access layer

One method per query over the SQLAlchemy models. Methods return plain
dict DTOs built with the models' ``to_dict`` so that nothing above this
layer holds ORM instances.
"""

from booking_portal.repositories.user_repository import UserRepository
from booking_portal.repositories.booking_repository import BookingRepository

__all__ = [
    'UserRepository',
    'BookingRepository',
]
