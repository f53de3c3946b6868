from fastapi import Depends, HTTPException, status, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from typing import Optional

from ..core.config import settings
from ..core.database import get_db, get_redis
from ..core.exceptions import AuthenticationError, AuthorizationError, NotFoundError
from ..core.security import verify_token, UserRole, TokenPayload, Principal
from ..models.user import User
from ..services.auth_service import AuthService

# Missing credentials are reported as 401 by get_current_user_token
security = HTTPBearer(auto_error=False)

async def get_current_user_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)
) -> TokenPayload:
    """Extract and verify JWT token from Authorization header."""
    if credentials is None:
        raise AuthenticationError("Not authenticated")

    token_payload = verify_token(credentials.credentials)
    if not token_payload:
        raise AuthenticationError("Invalid or expired token")

    if token_payload.token_type != "access":
        raise AuthenticationError("Invalid token type")

    if not token_payload.sub:
        raise AuthenticationError("Invalid token payload")

    return token_payload

async def get_current_principal(
    token_payload: TokenPayload = Depends(get_current_user_token),
    db: Session = Depends(get_db)
) -> Principal:
    """Resolve the session for the bearer token (registered user or seed doctor)."""
    principal = AuthService(db).principal_from_claims(token_payload.sub, token_payload.seed)
    if principal is None:
        raise AuthenticationError("User not found or deactivated")
    return principal

async def get_current_user(
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db)
) -> User:
    """Database user behind the session. Seed doctors have none."""
    if principal.is_seed:
        raise AuthorizationError("Seed doctor accounts cannot use this endpoint")

    user = db.query(User).filter(User.id == principal.user_id).first()
    if not user:
        raise NotFoundError("User not found")
    return user

def require_role(*allowed_roles: UserRole):
    """Create a dependency that requires specific user roles."""
    async def role_checker(
        principal: Principal = Depends(get_current_principal)
    ) -> Principal:
        if principal.role not in allowed_roles:
            raise AuthorizationError(
                f"Access denied. Required roles: {[role.value for role in allowed_roles]}"
            )
        return principal

    return role_checker

get_patient = require_role(UserRole.PATIENT)
get_doctor = require_role(UserRole.DOCTOR)

# Rate limiting dependency
async def rate_limit_check(
    request: Request,
    redis_client = Depends(get_redis)
) -> None:
    """Fixed-window rate limit per client IP."""
    client_ip = request.client.host if request.client else "unknown"
    key = f"rate_limit:{request.url.path}:{client_ip}"

    current_requests = redis_client.get(key)
    if current_requests is None:
        redis_client.setex(key, settings.RATE_LIMIT_WINDOW_SECONDS, 1)
    else:
        if int(current_requests) >= settings.RATE_LIMIT_REQUESTS:
            raise HTTPException(
                status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                detail="Too many requests. Please try again later."
            )
        redis_client.incr(key)
