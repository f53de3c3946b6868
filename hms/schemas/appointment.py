from datetime import date as Date, datetime
from typing import Dict, List, Optional
from pydantic import ConfigDict, Field, field_validator

from .common import APIModel
from ..models.appointment import AppointmentStatus, SymptomSeverity

TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"

class Symptom(APIModel):
    name: str = Field(..., min_length=1, max_length=200)
    severity: SymptomSeverity = SymptomSeverity.MILD
    duration: str = ""

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Symptom name is required")
        return value

    @field_validator("severity", mode="before")
    @classmethod
    def lower_severity(cls, value):
        return value.lower() if isinstance(value, str) else value

class AdditionalInfo(APIModel):
    allergies: Optional[str] = None
    current_medications: Optional[str] = None
    previous_treatments: Optional[str] = None
    additional_notes: Optional[str] = None

class AppointmentCreate(APIModel):
    doctor_id: str = Field(..., min_length=1)
    date: Date
    time: str = Field(..., pattern=TIME_PATTERN)
    symptoms: List[Symptom] = Field(..., min_length=1)
    severity: Optional[str] = None
    duration: Optional[str] = None
    reason: Optional[str] = None
    additional_info: Optional[AdditionalInfo] = None

class AppointmentUpdate(APIModel):
    """Either a lifecycle transition (``status`` alone) or a partial field edit."""
    model_config = ConfigDict(extra="forbid")

    status: Optional[AppointmentStatus] = None
    symptoms: Optional[List[Symptom]] = Field(None, min_length=1)
    severity: Optional[str] = None
    duration: Optional[str] = None
    reason: Optional[str] = None
    previous_treatments: Optional[str] = None
    allergies: Optional[str] = None
    current_medications: Optional[str] = None
    additional_notes: Optional[str] = None
    diagnosis: Optional[str] = None
    prescription: Optional[str] = None
    doctor_notes: Optional[str] = None

class AppointmentOut(APIModel):
    id: str
    patient_id: str
    doctor_id: str
    doctor_name: str
    patient_name: str
    date: Date
    time: str
    symptoms: List[Symptom]
    severity: Optional[str] = None
    duration: Optional[str] = None
    reason: Optional[str] = None
    status: AppointmentStatus
    allergies: Optional[str] = None
    current_medications: Optional[str] = None
    previous_treatments: Optional[str] = None
    additional_notes: Optional[str] = None
    diagnosis: Optional[str] = None
    prescription: Optional[str] = None
    doctor_notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    # Counterpart details resolved at read time; the name fields above stay
    # the snapshots taken at booking
    doctor_display_name: Optional[str] = None
    doctor_email: Optional[str] = None
    doctor_specialization: Optional[str] = None
    doctor_image_url: Optional[str] = None
    patient_display_name: Optional[str] = None
    patient_email: Optional[str] = None

class AppointmentSummary(APIModel):
    total: int
    upcoming: int
    past: int
    by_status: Dict[str, int]

class PredictionSymptom(APIModel):
    name: str
    severity: str = "Mild"

class PredictionRequest(APIModel):
    symptoms: List[PredictionSymptom]

class PredictionOut(APIModel):
    duration: int
    diseases: List[str]
    impact: int

class PredictedDiseaseOut(APIModel):
    name: str
    probability: float

class PossibleADROut(APIModel):
    drug: str
    reaction: str
    severity: str

class ImpactFactorsOut(APIModel):
    urgency: float
    complexity: float
    chronicity_risk: float

class ConsultationInsights(APIModel):
    predicted_diseases: List[PredictedDiseaseOut]
    possible_adrs: List[PossibleADROut]
    estimated_consultation_time: int
    severity_score: float
    impact_factors: ImpactFactorsOut

class AppointmentInsights(APIModel):
    predictions: PredictionOut
    consultation: Optional[ConsultationInsights] = None
    adverse_reaction_warnings: List[str]
    drug_interaction_warnings: List[str]
