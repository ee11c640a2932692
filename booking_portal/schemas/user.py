"""
Pydantic models for user registration, login and lookup.

Registration and login only describe the request body; the user data
returned by the API is built by the repositories from the ORM models.
"""
from pydantic import BaseModel, Field, field_validator
from booking_portal.schemas.common import ResourceId
from booking_portal.utils.helpers import is_valid_email

class RegisterBody(BaseModel):
    name: str
    email: str = Field(..., examples=['user@example.com'])
    phone_number: str
    password: str

    @field_validator('name')
    @classmethod
    def name_required(cls, value):
        if len(value) < 1:
            raise ValueError('Name is required')
        return value

    @field_validator('email')
    @classmethod
    def email_format(cls, value):
        if not is_valid_email(value):
            raise ValueError('Invalid email address')
        return value

    @field_validator('phone_number')
    @classmethod
    def phone_required(cls, value):
        if len(value) < 1:
            raise ValueError('Phone number is required')
        return value

    @field_validator('password')
    @classmethod
    def password_length(cls, value):
        if len(value) < 6:
            raise ValueError('Password must be at least 6 characters')
        return value

class RegisterRequest(BaseModel):
    body: RegisterBody

class LoginBody(BaseModel):
    email: str
    password: str

    @field_validator('email')
    @classmethod
    def email_format(cls, value):
        if not is_valid_email(value):
            raise ValueError('Invalid email address')
        return value

    @field_validator('password')
    @classmethod
    def password_required(cls, value):
        if len(value) < 1:
            raise ValueError('Password is required')
        return value

class LoginRequest(BaseModel):
    body: LoginBody

class UserParams(BaseModel):
    id: ResourceId

class GetUserRequest(BaseModel):
    params: UserParams
