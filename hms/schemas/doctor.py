from typing import List, Optional
from pydantic import Field

from .common import APIModel

_TIME = r"^([01]\d|2[0-3]):[0-5]\d$"

class Availability(APIModel):
    days: List[str] = ["Mon", "Tue", "Wed", "Thu", "Fri"]
    start_time: str = Field("09:00", pattern=_TIME)
    end_time: str = Field("17:00", pattern=_TIME)

class Education(APIModel):
    degree: str
    institution: str
    year: Optional[int] = None

class DoctorOut(APIModel):
    id: str
    name: str
    email: str
    specialization: str
    experience: int = 0
    qualifications: str = ""
    license_number: str = ""
    availability: Availability
    about: str = ""
    image_url: str = ""
    consultation_fee: int = 0
    rating: float = 4.0
    education: List[Education] = []
    awards: List[str] = []
    languages: List[str] = []
    is_available: bool = True
    is_seed: bool = False

class DoctorProfileUpdate(APIModel):
    specialization: Optional[str] = Field(None, min_length=1)
    experience: Optional[int] = Field(None, ge=0)
    qualifications: Optional[str] = None
    about: Optional[str] = None
    image_url: Optional[str] = None
    consultation_fee: Optional[int] = Field(None, ge=0)
    availability: Optional[Availability] = None
    education: Optional[List[Education]] = None
    awards: Optional[List[str]] = None
    languages: Optional[List[str]] = None
    is_available: Optional[bool] = None
