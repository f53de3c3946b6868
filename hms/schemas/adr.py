from datetime import date as Date, datetime
from typing import List, Literal, Optional
from pydantic import Field

from .common import APIModel

class DetectedReactionOut(APIModel):
    type: str
    severity: str
    confidence: float

class ADRDetectRequest(APIModel):
    medication: str = Field(..., min_length=1)
    reaction: str = Field(..., min_length=1)

class ADRDetectResponse(APIModel):
    symptoms: List[str]
    reactions: List[DetectedReactionOut]
    severity: str

class ADRReportCreate(APIModel):
    medication: str = Field(..., min_length=1, max_length=200)
    reaction: str = Field(..., min_length=1)
    severity: Literal["mild", "moderate", "severe", "critical"]
    date: Date
    description: str = Field(..., min_length=1)

class ADRReportOut(APIModel):
    id: str
    patient_id: str
    medication: str
    reaction: str
    severity: str
    date: Date
    description: str
    status: str
    detected_reactions: List[DetectedReactionOut] = []
    computed_severity: str = "none"
    created_at: Optional[datetime] = None
