"""
Auth schemas
"""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, EmailStr

from .base import CamelModel


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class TokenResponse(BaseModel):
    token: str


class ClaimsResponse(CamelModel):
    """Decoded claims of the caller's token"""
    user_id: str
    email: str
    is_admin: bool
    issued_at: Optional[datetime] = None
    expires_at: Optional[datetime] = None
