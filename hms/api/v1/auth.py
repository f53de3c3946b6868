from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...core.database import get_db
from ...core.security import Principal, TokenPayload
from ...api.deps import (
    get_current_principal, get_current_user, get_current_user_token, rate_limit_check
)
from ...services.auth_service import AuthService, principal_for_user, user_response
from ...schemas.auth import (
    UserLogin, UserRegister, TokenResponse, UserResponse,
    RefreshTokenRequest, ChangePassword, TokenInfo
)
from ...schemas.common import ERROR_RESPONSES, Envelope, ok
from ...models.user import User

router = APIRouter(prefix="/auth", tags=["Authentication"], responses=ERROR_RESPONSES)

@router.post("/register", response_model=Envelope[UserResponse], status_code=201)
async def register(
    user_data: UserRegister,
    db: Session = Depends(get_db),
    _: None = Depends(rate_limit_check)
):
    """Register a new patient or doctor."""
    auth_service = AuthService(db)
    user = auth_service.register_user(user_data)
    return ok(user_response(principal_for_user(user), user.is_active), "Registration successful")

@router.post("/login", response_model=Envelope[TokenResponse])
async def login(
    login_data: UserLogin,
    db: Session = Depends(get_db),
):
    """Authenticate user and return access tokens."""
    auth_service = AuthService(db)
    return ok(auth_service.authenticate_user(login_data), "Login successful")

@router.post("/refresh", response_model=Envelope[TokenResponse])
async def refresh_token(
    refresh_data: RefreshTokenRequest,
    db: Session = Depends(get_db)
):
    """Refresh access token using refresh token."""
    auth_service = AuthService(db)
    return ok(auth_service.refresh_access_token(refresh_data.refresh_token))

@router.post("/logout", response_model=Envelope[dict])
async def logout(
    refresh_data: RefreshTokenRequest,
    db: Session = Depends(get_db)
):
    """Logout user by revoking refresh token."""
    auth_service = AuthService(db)
    success = auth_service.logout_user(refresh_data.refresh_token)

    return ok(message="Successfully logged out" if success else "Logout completed")

@router.get("/me", response_model=Envelope[UserResponse])
async def get_current_user_info(
    principal: Principal = Depends(get_current_principal)
):
    """Get current session information. Works for seed doctors too."""
    return ok(user_response(principal))

@router.post("/change-password", response_model=Envelope[dict])
async def change_password(
    password_data: ChangePassword,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Change user password."""
    AuthService(db).change_password(
        current_user, password_data.current_password, password_data.new_password
    )
    return ok(message="Password changed successfully")

@router.post("/verify-token", response_model=Envelope[TokenInfo])
async def verify_token_endpoint(
    token_payload: TokenPayload = Depends(get_current_user_token)
):
    """Verify if token is valid."""
    return ok(TokenInfo(
        valid=True,
        user_id=token_payload.sub,
        email=token_payload.email,
        role=token_payload.role or "",
        profile_id=token_payload.profile_id,
        expires=token_payload.exp,
    ))
