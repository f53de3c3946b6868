from sqlalchemy.orm import Session
from fastapi import HTTPException, status
from datetime import datetime, timedelta
from typing import Optional
import hashlib
import logging
import secrets

from ..models.user import User, RefreshToken
from ..models.patient import Patient
from ..models.doctor import Doctor
from ..core.config import settings
from ..core.exceptions import AuthenticationError, AuthorizationError, ConflictError
from ..core.security import (
    verify_password, get_password_hash, create_token_pair,
    verify_token, UserRole, Principal
)
from ..schemas.auth import UserLogin, UserRegister, TokenResponse, UserResponse
from .seed_doctors import SeedDoctor, get_seed_doctor, get_seed_doctor_by_email

logger = logging.getLogger(__name__)

def principal_for_seed(doctor: SeedDoctor) -> Principal:
    return Principal(
        user_id=doctor.id,
        role=UserRole.DOCTOR,
        profile_id=doctor.id,
        is_seed=True,
        name=doctor.name,
        email=doctor.email,
    )

def principal_for_user(user: User) -> Principal:
    profile_id = None
    if user.role == UserRole.PATIENT and user.patient:
        profile_id = user.patient.id
    elif user.role == UserRole.DOCTOR and user.doctor:
        profile_id = user.doctor.id
    return Principal(
        user_id=user.id,
        role=UserRole(user.role),
        profile_id=profile_id,
        name=user.name,
        email=user.email,
    )

def user_response(principal: Principal, is_active: bool = True) -> UserResponse:
    return UserResponse(
        id=principal.user_id,
        email=principal.email,
        name=principal.name,
        role=principal.role,
        is_active=is_active,
        profile_id=principal.profile_id,
        is_seed=principal.is_seed,
    )

class AuthService:
    def __init__(self, db: Session):
        self.db = db

    def register_user(self, user_data: UserRegister) -> User:
        """Register a new user together with their patient or doctor profile."""
        email = user_data.email.lower()

        if get_seed_doctor_by_email(email):
            raise AuthorizationError(
                "This email belongs to a pre-approved doctor; please use a different email"
            )

        existing_user = self.db.query(User).filter(User.email == email).first()
        if existing_user:
            raise ConflictError("Email already registered")

        new_user = User(
            email=email,
            name=user_data.name.strip(),
            password_hash=get_password_hash(user_data.password),
            role=UserRole(user_data.role),
            is_active=True,
        )
        self.db.add(new_user)
        self.db.flush()

        if new_user.role == UserRole.DOCTOR:
            profile = Doctor(
                user_id=new_user.id,
                specialization=user_data.specialization or "General Medicine",
                license_number=user_data.license_number or f"MCI-{secrets.randbelow(900000) + 100000}",
                experience=user_data.experience or 0,
                qualifications=user_data.qualifications or "",
                about=user_data.about or "",
            )
            if user_data.availability:
                profile.availability = user_data.availability.model_dump()
        else:
            profile = Patient(
                user_id=new_user.id,
                phone=user_data.phone,
                date_of_birth=user_data.date_of_birth,
                gender=user_data.gender,
                blood_group=user_data.blood_group,
                allergies=list(user_data.allergies),
            )
        self.db.add(profile)
        self.db.commit()
        self.db.refresh(new_user)

        logger.info(f"Registered {new_user.role.value} account {new_user.id}")
        return new_user

    def authenticate_user(self, login_data: UserLogin) -> TokenResponse:
        """Authenticate user and return tokens."""
        seed = get_seed_doctor_by_email(login_data.email)
        if seed:
            return self._authenticate_seed_doctor(seed, login_data.password)

        user = self.db.query(User).filter(
            User.email == login_data.email.lower()
        ).first()

        if not user:
            logger.warning(f"Login attempt for unknown email {login_data.email}")
            raise AuthenticationError("Invalid email or password")

        # Check account lockout
        if user.locked_until and user.locked_until > datetime.utcnow():
            raise HTTPException(
                status_code=status.HTTP_423_LOCKED,
                detail="Account is temporarily locked"
            )

        if not verify_password(login_data.password, user.password_hash):
            self._handle_failed_login(user)
            raise AuthenticationError("Invalid email or password")

        if not user.is_active:
            raise AuthenticationError("Account is deactivated")

        # Reset failed login attempts
        user.failed_login_attempts = 0
        user.locked_until = None
        user.last_login = datetime.utcnow()

        principal = principal_for_user(user)
        response = self._issue_tokens(principal)
        self.db.commit()

        logger.info(f"User {user.id} logged in as {principal.role.value}")
        return response

    def refresh_access_token(self, refresh_token: str) -> TokenResponse:
        """Refresh access token using refresh token."""
        token_payload = verify_token(refresh_token)
        if not token_payload or token_payload.token_type != "refresh" or not token_payload.sub:
            raise AuthenticationError("Invalid refresh token")

        token_hash = hashlib.sha256(refresh_token.encode()).hexdigest()
        stored_token = self.db.query(RefreshToken).filter(
            RefreshToken.token_hash == token_hash,
            RefreshToken.is_revoked == False,  # noqa: E712
            RefreshToken.expires_at > datetime.utcnow()
        ).first()

        if not stored_token:
            raise AuthenticationError("Invalid or expired refresh token")

        principal = self.principal_from_claims(token_payload.sub, token_payload.seed)
        if principal is None:
            raise AuthenticationError("User not found or inactive")

        stored_token.is_revoked = True
        response = self._issue_tokens(principal)
        self.db.commit()
        return response

    def logout_user(self, refresh_token: str) -> bool:
        """Logout user by revoking refresh token."""
        token_hash = hashlib.sha256(refresh_token.encode()).hexdigest()
        stored_token = self.db.query(RefreshToken).filter(
            RefreshToken.token_hash == token_hash
        ).first()

        if not stored_token:
            return False

        stored_token.is_revoked = True
        self.db.commit()
        return True

    def change_password(self, user: User, current_password: str, new_password: str):
        if not verify_password(current_password, user.password_hash):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Current password is incorrect"
            )
        user.password_hash = get_password_hash(new_password)
        self.db.commit()

    def principal_from_claims(self, user_id: str, seed: bool) -> Optional[Principal]:
        """Rebuild the session for a token subject, or None if it no longer exists."""
        if seed:
            doctor = get_seed_doctor(user_id)
            if doctor and settings.SEED_DOCTOR_LOGIN_ENABLED:
                return principal_for_seed(doctor)
            return None

        user = self.db.query(User).filter(User.id == user_id).first()
        if not user or not user.is_active:
            return None
        return principal_for_user(user)

    def _authenticate_seed_doctor(self, doctor: SeedDoctor, password: str) -> TokenResponse:
        if not settings.SEED_DOCTOR_LOGIN_ENABLED:
            raise AuthenticationError("Invalid email or password")
        if not secrets.compare_digest(password, settings.SEED_DOCTOR_PASSWORD):
            logger.warning(f"Failed seed doctor login for {doctor.id}")
            raise AuthenticationError("Invalid email or password")

        principal = principal_for_seed(doctor)
        response = self._issue_tokens(principal)
        self.db.commit()

        logger.info(f"Seed doctor {doctor.id} logged in")
        return response

    def _issue_tokens(self, principal: Principal) -> TokenResponse:
        tokens = create_token_pair(
            principal.user_id,
            principal.email,
            principal.role,
            profile_id=principal.profile_id,
            seed=principal.is_seed,
        )
        self._store_refresh_token(principal.user_id, tokens.refresh_token)

        return TokenResponse(
            access_token=tokens.access_token,
            refresh_token=tokens.refresh_token,
            token_type=tokens.token_type,
            expires_in=tokens.expires_in,
            user=user_response(principal),
        )

    def _handle_failed_login(self, user: User):
        """Handle failed login attempt."""
        user.failed_login_attempts = (user.failed_login_attempts or 0) + 1

        if user.failed_login_attempts >= settings.MAX_FAILED_LOGINS:
            user.locked_until = datetime.utcnow() + timedelta(minutes=settings.LOCKOUT_MINUTES)
            logger.warning(f"Account {user.id} locked after {user.failed_login_attempts} failed logins")

        self.db.commit()

    def _store_refresh_token(self, user_id: str, refresh_token: str):
        """Store refresh token in database."""
        token_hash = hashlib.sha256(refresh_token.encode()).hexdigest()

        token_payload = verify_token(refresh_token)
        expires_at = datetime.utcfromtimestamp(token_payload.exp) if token_payload and token_payload.exp else datetime.utcnow() + timedelta(days=settings.REFRESH_TOKEN_EXPIRE_DAYS)

        # Only the newest refresh token stays valid
        self.db.query(RefreshToken).filter(
            RefreshToken.user_id == user_id
        ).update({"is_revoked": True})

        self.db.add(RefreshToken(
            user_id=user_id,
            token_hash=token_hash,
            expires_at=expires_at
        ))
