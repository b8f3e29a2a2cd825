"""Authentication router: registration and login."""
from fastapi import APIRouter, Depends, Request, status
from sqlmodel import Session

from task_manager.db.config import get_session
from task_manager.schemas.auth import LoginRequest, MessageResponse, RegisterRequest, TokenResponse
from task_manager.services.user_service import UserService

router = APIRouter(tags=["Authentication"])


def get_user_service(session: Session = Depends(get_session)) -> UserService:
    """Dependency for getting UserService instance."""
    return UserService(session)


@router.post("/register", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def register(body: RegisterRequest, service: UserService = Depends(get_user_service)):
    service.register(body.username, body.password)
    return MessageResponse(message="User registered successfully.")


@router.post("/login", response_model=TokenResponse)
def login(body: LoginRequest, request: Request, service: UserService = Depends(get_user_service)):
    """Exchange a username and password for a one hour bearer token."""
    user = service.authenticate(body.username, body.password)
    token = request.app.state.token_service.issue(user.id)
    return TokenResponse(token=token)
