import os
from http import HTTPStatus
from flask import Blueprint, request, send_file, current_app
from booking_portal.schemas.booking import (
    CreateBookingRequest, GetBookingRequest, GetAttachmentRequest,
    CreateMessageRequest, GetMessageAttachmentRequest
)
from booking_portal.services.booking_service import BookingService
from booking_portal.utils.auth import require_auth
from booking_portal.utils.responses import ServiceResponse, handle_service_response
from booking_portal.utils.uploads import accept_uploads, discard_files
from booking_portal.utils.validation import validate_request

bp = Blueprint('bookings', __name__)

booking_service = BookingService()

@bp.route('/', methods=['GET'])
@require_auth
def get_bookings():
    """
    Get bookings of the logged in user
    ---
    tags:
      - Bookings
    security:
      - cookieAuth: []
    responses:
      200:
        description: Bookings retrieved successfully, newest first
      401:
        description: Authentication required
    """
    return handle_service_response(
        booking_service.get_bookings_by_user_id(request.current_user.user_id)
    )

@bp.route('/', methods=['POST'])
@require_auth
@validate_request(CreateBookingRequest)
def create_booking():
    """
    Create a booking
    ---
    tags:
      - Bookings
    security:
      - cookieAuth: []
    requestBody:
      required: true
      content:
        application/json:
          schema:
            type: object
            required:
              - title
              - date
            properties:
              title:
                type: string
              description:
                type: string
              status:
                type: string
                default: Work Order
              date:
                type: string
                format: date-time
    responses:
      201:
        description: Booking created successfully
      400:
        description: Invalid input
      401:
        description: Authentication required
    """
    body = request.validated.body
    service_response = booking_service.create_booking(
        user_id=request.current_user.user_id,
        title=body.title,
        description=body.description,
        status=body.status,
        date=body.date
    )
    return handle_service_response(service_response)

@bp.route('/<id>', methods=['GET'])
@require_auth
@validate_request(GetBookingRequest)
def get_booking(id):
    """
    Get a booking with its attachments and messages
    ---
    tags:
      - Bookings
    parameters:
      - in: path
        name: id
        required: true
        schema:
          type: integer
    security:
      - cookieAuth: []
    responses:
      200:
        description: Booking retrieved successfully
      401:
        description: Authentication required
      404:
        description: Booking not found
    """
    return handle_service_response(
        booking_service.get_booking_by_id(request.validated.params.id, request.current_user.user_id)
    )

@bp.route('/<bookingId>/attachments/<attachmentId>', methods=['GET'])
@require_auth
@validate_request(GetAttachmentRequest)
def get_attachment(bookingId, attachmentId):
    """
    Get attachment metadata of a booking
    ---
    tags:
      - Bookings
    parameters:
      - in: path
        name: bookingId
        required: true
        schema:
          type: integer
      - in: path
        name: attachmentId
        required: true
        schema:
          type: integer
    security:
      - cookieAuth: []
    responses:
      200:
        description: Attachment retrieved successfully
      401:
        description: Authentication required
      404:
        description: Attachment not found
    """
    params = request.validated.params
    return handle_service_response(
        booking_service.get_attachment(params.booking_id, params.attachment_id, request.current_user.user_id)
    )

@bp.route('/<id>/messages', methods=['POST'])
@require_auth
@validate_request(CreateMessageRequest)
@accept_uploads('files')
def create_message(id):
    """
    Post a message to a booking, optionally with up to 5 files
    ---
    tags:
      - Bookings
    parameters:
      - in: path
        name: id
        required: true
        schema:
          type: integer
    security:
      - cookieAuth: []
    requestBody:
      required: true
      content:
        multipart/form-data:
          schema:
            type: object
            required:
              - content
            properties:
              content:
                type: string
              files:
                type: array
                maxItems: 5
                items:
                  type: string
                  format: binary
        application/json:
          schema:
            type: object
            required:
              - content
            properties:
              content:
                type: string
    responses:
      201:
        description: Message created successfully
      400:
        description: Invalid input or rejected file
      401:
        description: Authentication required
      404:
        description: Booking not found
      413:
        description: Request body is too large
    """
    uploaded_files = request.uploaded_files
    service_response = booking_service.create_message(
        request.validated.params.id,
        request.current_user.user_id,
        request.validated.body.content,
        uploaded_files
    )

    # Nothing references the files when the message was not stored
    if not service_response.is_success:
        discard_files(uploaded_files)

    return handle_service_response(service_response)

@bp.route('/<bookingId>/messages/<messageId>/attachments/<attachmentId>', methods=['GET'])
@require_auth
@validate_request(GetMessageAttachmentRequest)
def get_message_attachment(bookingId, messageId, attachmentId):
    """
    Download a file attached to a booking message
    ---
    tags:
      - Bookings
    parameters:
      - in: path
        name: bookingId
        required: true
        schema:
          type: integer
      - in: path
        name: messageId
        required: true
        schema:
          type: integer
      - in: path
        name: attachmentId
        required: true
        schema:
          type: integer
    security:
      - cookieAuth: []
    responses:
      200:
        description: File contents
      401:
        description: Authentication required
      404:
        description: Message attachment not found
      500:
        description: Error sending file
    """
    params = request.validated.params
    service_response = booking_service.get_message_attachment(
        params.booking_id,
        params.message_id,
        params.attachment_id,
        request.current_user.user_id
    )
    if not service_response.is_success:
        return handle_service_response(service_response)

    attachment = service_response.response_object
    file_path = os.path.abspath(attachment['filePath'])
    if not os.path.isfile(file_path):
        current_app.logger.error(f"Message attachment {attachment['id']} missing on disk: {file_path}")
        return handle_service_response(
            ServiceResponse.failure('Error sending file', None, HTTPStatus.INTERNAL_SERVER_ERROR)
        )

    return send_file(
        file_path,
        mimetype=attachment['mimeType'],
        download_name=attachment['fileName']
    )
