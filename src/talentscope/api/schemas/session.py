from __future__ import annotations

from pydantic import BaseModel

from talentscope.models import Identity, Role


class LoginRequest(BaseModel):
    email: str = ""
    password: str = ""


class RoleRequest(BaseModel):
    role: Role


class ForgotPasswordRequest(BaseModel):
    email: str = ""


class PasswordChangeRequest(BaseModel):
    current_password: str = ""
    new_password: str = ""
    confirm_password: str = ""


class SessionResponse(BaseModel):
    authenticated: bool
    user: Identity | None = None


class MessageResponse(BaseModel):
    success: bool = True
    message: str | None = None
