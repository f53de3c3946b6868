from datetime import datetime
from typing import List, Literal, Optional
from pydantic import Field

from .common import APIModel

Severity = Literal["mild", "moderate", "severe", "critical"]

class EarlyDetectionCreate(APIModel):
    symptoms: List[str] = Field(..., min_length=1)
    severity: Severity
    age: int = Field(..., ge=0, le=130)
    gender: str = Field(..., min_length=1)
    medical_history: List[str] = []
    family_history: List[str] = []
    lifestyle: Optional[str] = None

class EarlyDetectionOut(APIModel):
    id: str
    user_id: str
    symptoms: List[str]
    severity: str
    age: int
    gender: str
    medical_history: List[str] = []
    family_history: List[str] = []
    lifestyle: Optional[str] = None
    status: str
    emergency_rating: Optional[int] = None
    risk_level: Optional[str] = None
    potential_conditions: List[str] = []
    recommendations: List[str] = []
    estimated_duration: Optional[int] = None
    created_at: Optional[datetime] = None
