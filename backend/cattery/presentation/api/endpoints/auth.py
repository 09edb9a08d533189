"""Authentication endpoints: register, login, logout and status."""

from fastapi import APIRouter, Depends, status

from cattery.application.schemas import (
    AuthStatusResponse,
    LoginRequest,
    LoginResponse,
    MessageResponse,
    RegisterRequest,
    RegisterResponse,
    UserResponse,
)
from cattery.application.services import AuthService
from cattery.domain.entities import User
from cattery.infrastructure.dependencies import (
    get_auth_service,
    get_bearer_token,
    get_current_user,
)

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
async def register(
    data: RegisterRequest,
    service: AuthService = Depends(get_auth_service),
) -> RegisterResponse:
    """Create a new identity. A taken username is a 409."""
    user = await service.register(data.username, data.password, data.email)
    return RegisterResponse(
        message="Registration successful! Please log in.",
        user=UserResponse.model_validate(user, from_attributes=True),
    )


@router.post("/login", response_model=LoginResponse)
async def login(
    data: LoginRequest,
    service: AuthService = Depends(get_auth_service),
) -> LoginResponse:
    """Exchange credentials for a bearer token."""
    user, token, expires_at = await service.login(data.username, data.password)
    return LoginResponse(
        message="Login successful!",
        user=UserResponse.model_validate(user, from_attributes=True),
        token=token,
        expires_at=expires_at,
    )


@router.post("/logout", response_model=MessageResponse)
async def logout(
    token: str | None = Depends(get_bearer_token),
    service: AuthService = Depends(get_auth_service),
) -> MessageResponse:
    """Revoke the presented token. Always succeeds."""
    await service.logout(token)
    return MessageResponse(message="Logged out successfully.")


@router.get("/status", response_model=AuthStatusResponse)
async def auth_status(user: User | None = Depends(get_current_user)) -> AuthStatusResponse:
    """Report who the bearer token belongs to, if anyone."""
    if user is None:
        return AuthStatusResponse(authenticated=False)
    return AuthStatusResponse(
        authenticated=True,
        user=UserResponse.model_validate(user, from_attributes=True),
    )
