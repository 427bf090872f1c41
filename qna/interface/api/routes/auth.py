"""Authentication routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Response, status
from pydantic import BaseModel

from qna.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
    RegisterRequest,
    RegisterResponse,
    RegisterUseCase,
)
from qna.config import Settings
from qna.domain.error import BusinessRuleViolationError, NotFoundError, UnauthorizedError
from qna.util.jwt import JWTError
from qna.util.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


class LoginAPIResponse(BaseModel):
    """Login response (the token itself travels in the cookie)."""

    success: bool
    user_id: str
    username: str


class LogoutResponse(BaseModel):
    """Logout response."""

    success: bool
    message: str


class AuthStatusResponse(BaseModel):
    """Response for checking authentication status.

    Used by /auth/me to return current user if authenticated,
    or indicate unauthenticated state without raising an error.
    """

    authenticated: bool
    user: GetCurrentUserResponse | None = None


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    request: RegisterRequest,
    register_use_case: FromDishka[RegisterUseCase],
) -> RegisterResponse:
    """Create an account.

    Args:
        request: Username, email and password
        register_use_case: Register use case from DI

    Returns:
        The new account (without password hash)

    Raises:
        HTTPException: 400 if the email is taken or the username is invalid
    """
    try:
        response = await register_use_case.execute(request)
    except (BusinessRuleViolationError, ValueError) as e:
        logger.info(f"Registration rejected: {e}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )

    logger.info(f"User registered: {response.user_id}")
    return response


@router.post("/login", response_model=LoginAPIResponse)
async def login(
    request: LoginRequest,
    response: Response,
    login_use_case: FromDishka[LoginUseCase],
    settings: FromDishka[Settings],
) -> LoginAPIResponse:
    """Log in with email and password and set the session cookie.

    Args:
        request: Email and password
        response: FastAPI response object
        login_use_case: Login use case from DI
        settings: Application settings from DI

    Returns:
        Who logged in

    Raises:
        HTTPException: 401 on bad credentials
    """
    try:
        login_response = await login_use_case.execute(request)
    except UnauthorizedError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )

    # Production is cross-site over HTTPS
    is_production = settings.is_production
    response.set_cookie(
        key="auth_token",
        value=login_response.token,
        httponly=True,
        secure=is_production,
        samesite="none" if is_production else "lax",
        path="/",
        max_age=settings.auth.cookie_max_age,
    )
    logger.info(f"Auth cookie set for user: {login_response.user_id}")

    return LoginAPIResponse(
        success=True,
        user_id=login_response.user_id,
        username=login_response.username.root,
    )


@router.post("/logout", response_model=LogoutResponse)
async def logout(response: Response) -> LogoutResponse:
    """Logout user by clearing authentication cookie.

    Args:
        response: FastAPI response object

    Returns:
        Logout success message
    """
    response.delete_cookie(key="auth_token", path="/")
    return LogoutResponse(success=True, message="Successfully logged out")


@router.get("/me", response_model=AuthStatusResponse)
async def get_current_user(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> AuthStatusResponse:
    """Get current user if authenticated, or return unauthenticated status.

    Safe to call without authentication: it answers authenticated=false
    instead of raising.

    Args:
        get_current_user_use_case: Get current user use case from DI
        auth_token: JWT token from cookie (optional)

    Returns:
        Authentication status with user information if authenticated
    """
    if not auth_token:
        return AuthStatusResponse(authenticated=False)

    try:
        user = await get_current_user_use_case.execute(
            GetCurrentUserRequest(token=auth_token)
        )
        return AuthStatusResponse(authenticated=True, user=user)

    except JWTError:
        # Invalid or expired token
        return AuthStatusResponse(authenticated=False)
    except NotFoundError:
        # JWT valid but user no longer exists
        return AuthStatusResponse(authenticated=False)
