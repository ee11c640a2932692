"""Session authentication utilities and decorators"""
from dataclasses import dataclass
from typing import Optional
from functools import wraps
from http import HTTPStatus
from flask import request, session
from booking_portal.utils.responses import ServiceResponse, handle_service_response

@dataclass(frozen=True)
class Principal:
    """Verified identity of the session's user for the current request"""
    user_id: int
    email: Optional[str] = None
    name: Optional[str] = None
    phone_number: Optional[str] = None

def start_session(user):
    """Populate the session from a user DTO after login or registration"""
    session.clear()
    session.permanent = True
    session['userId'] = user['id']
    session['userEmail'] = user.get('email')
    if user.get('name') is not None:
        session['userName'] = user['name']
    if user.get('phone_number') is not None:
        session['userPhoneNumber'] = user['phone_number']

def end_session():
    """Drop the server-side session record; its id stops authenticating"""
    session.clear()

def get_current_principal():
    """Build the principal from the session, or None when not logged in"""
    user_id = session.get('userId')
    if not user_id:
        return None
    return Principal(
        user_id=user_id,
        email=session.get('userEmail'),
        name=session.get('userName'),
        phone_number=session.get('userPhoneNumber')
    )

def session_snapshot(principal):
    return {
        'userName': principal.name,
        'userPhoneNumber': principal.phone_number,
        'userId': principal.user_id,
        'userEmail': principal.email
    }

def require_auth(f):
    """Decorator to require an authenticated session"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        principal = get_current_principal()
        if not principal:
            return handle_service_response(
                ServiceResponse.failure('Authentication required', None, HTTPStatus.UNAUTHORIZED)
            )

        # Attach principal to request context
        request.current_user = principal
        return f(*args, **kwargs)
    return decorated_function
