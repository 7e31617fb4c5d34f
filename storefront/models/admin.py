"""Admin session models"""

from pydantic import BaseModel
from typing import Optional

from .common import Message


class LoginRequest(BaseModel):
    username: str
    password: str


class SessionResponse(BaseModel):
    """Current admin session"""
    is_authenticated: bool
    admin_user: Optional[str] = None
    messages: list[Message] = []
