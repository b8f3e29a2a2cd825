"""Authentication schemas for the Task Manager API."""
from pydantic import BaseModel, Field


class RegisterRequest(BaseModel):
    """Register request body."""
    username: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1, max_length=1024)


class LoginRequest(BaseModel):
    """Login request body."""
    username: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1, max_length=1024)


class TokenResponse(BaseModel):
    """Response containing the bearer token after login."""
    token: str


class MessageResponse(BaseModel):
    message: str
