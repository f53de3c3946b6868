from datetime import date
from typing import Annotated, List, Literal, Optional
from pydantic import AfterValidator, EmailStr, Field

from .common import APIModel
from .doctor import Availability
from ..core.security import UserRole

def _check_password_strength(value: str) -> str:
    if not any(c.isdigit() for c in value) or not any(c.isalpha() for c in value):
        raise ValueError("Password must contain both letters and digits")
    return value

# bcrypt only looks at the first 72 bytes
Password = Annotated[str, Field(min_length=8, max_length=72), AfterValidator(_check_password_strength)]

class UserRegister(APIModel):
    email: EmailStr
    password: Password
    name: str = Field(..., min_length=1, max_length=200)
    role: Literal["patient", "doctor"]

    # Doctor profile
    specialization: Optional[str] = None
    license_number: Optional[str] = None
    experience: Optional[int] = Field(None, ge=0)
    qualifications: Optional[str] = None
    about: Optional[str] = None
    availability: Optional[Availability] = None

    # Patient profile
    phone: Optional[str] = None
    date_of_birth: Optional[date] = None
    gender: Optional[str] = None
    blood_group: Optional[str] = None
    allergies: List[str] = []

class UserLogin(APIModel):
    email: EmailStr
    password: str

class UserResponse(APIModel):
    id: str
    email: str
    name: str
    role: UserRole
    is_active: bool = True
    profile_id: Optional[str] = None
    is_seed: bool = False

class TokenResponse(APIModel):
    access_token: str
    refresh_token: str
    token_type: str = "bearer"
    expires_in: int
    user: UserResponse

class RefreshTokenRequest(APIModel):
    refresh_token: str

class ChangePassword(APIModel):
    current_password: str
    new_password: Password

class TokenInfo(APIModel):
    valid: bool
    user_id: str
    email: Optional[str] = None
    role: str
    profile_id: Optional[str] = None
    expires: Optional[int] = None
