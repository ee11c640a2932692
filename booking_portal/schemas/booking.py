"""
Pydantic models for bookings, their attachments and message threads.

``CreateBookingBody`` fills in the default status so that services never
see a booking request without one.
"""
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from booking_portal.models.booking import DEFAULT_BOOKING_STATUS
from booking_portal.schemas.common import ResourceId
from booking_portal.utils.helpers import parse_iso_datetime

class CreateBookingBody(BaseModel):
    title: str
    description: Optional[str] = None
    status: str = Field(default=DEFAULT_BOOKING_STATUS)
    # Kept as the client's ISO string; ServiceM8 receives it verbatim
    date: str = Field(..., examples=['2025-01-01T09:00:00.000Z'])

    @field_validator('title')
    @classmethod
    def title_required(cls, value):
        if len(value) < 1:
            raise ValueError('Title is required')
        return value

    @field_validator('date')
    @classmethod
    def date_is_iso(cls, value):
        try:
            parse_iso_datetime(value)
        except ValueError:
            raise ValueError('Date must be a valid ISO datetime')
        return value

class CreateBookingRequest(BaseModel):
    body: CreateBookingBody

class BookingParams(BaseModel):
    id: ResourceId

class GetBookingRequest(BaseModel):
    params: BookingParams

class AttachmentParams(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    booking_id: ResourceId = Field(alias='bookingId')
    attachment_id: ResourceId = Field(alias='attachmentId')

class GetAttachmentRequest(BaseModel):
    params: AttachmentParams

class CreateMessageBody(BaseModel):
    content: str

    @field_validator('content')
    @classmethod
    def content_required(cls, value):
        if len(value) < 1:
            raise ValueError('Message content is required')
        return value

class CreateMessageRequest(BaseModel):
    params: BookingParams
    body: CreateMessageBody

class MessageAttachmentParams(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    booking_id: ResourceId = Field(alias='bookingId')
    message_id: ResourceId = Field(alias='messageId')
    attachment_id: ResourceId = Field(alias='attachmentId')

class GetMessageAttachmentRequest(BaseModel):
    params: MessageAttachmentParams
