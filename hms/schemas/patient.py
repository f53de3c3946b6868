from datetime import date
from typing import Dict, List, Optional
from pydantic import Field

from .common import APIModel

class PatientProfileOut(APIModel):
    id: str
    user_id: str
    name: str
    email: str
    phone: Optional[str] = None
    date_of_birth: Optional[date] = None
    gender: Optional[str] = None
    blood_group: Optional[str] = None
    height: Optional[float] = None
    weight: Optional[float] = None
    allergies: List[str] = []
    emergency_contact: Optional[Dict[str, str]] = None

class PatientProfileUpdate(APIModel):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    phone: Optional[str] = None
    date_of_birth: Optional[date] = None
    gender: Optional[str] = None
    blood_group: Optional[str] = None
    height: Optional[float] = Field(None, gt=0)
    weight: Optional[float] = Field(None, gt=0)
    allergies: Optional[List[str]] = None
    emergency_contact: Optional[Dict[str, str]] = None
