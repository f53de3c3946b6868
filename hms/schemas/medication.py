from datetime import date, datetime
from typing import List, Optional
from pydantic import Field, model_validator

from .common import APIModel

class MedicationIn(APIModel):
    name: str = Field(..., min_length=1, max_length=200)
    dosage: str = Field(..., min_length=1, max_length=100)
    frequency: str = Field(..., min_length=1, max_length=100)
    start_date: date
    end_date: Optional[date] = None
    instructions: Optional[str] = None

    @model_validator(mode="after")
    def end_after_start(self):
        if self.end_date and self.end_date < self.start_date:
            raise ValueError("endDate must not be before startDate")
        return self

class MedicationOut(APIModel):
    id: str
    name: str
    dosage: str
    frequency: str
    start_date: date
    end_date: Optional[date] = None
    instructions: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

class InteractionReport(APIModel):
    medications: List[str]
    warnings: List[str]
