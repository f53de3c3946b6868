from datetime import date
from typing import List, Literal, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...core.database import get_db
from ...core.security import Principal
from ...api.deps import get_current_principal
from ...services.early_detection_service import EarlyDetectionService
from ...schemas.early_detection import EarlyDetectionCreate, EarlyDetectionOut, Severity
from ...schemas.common import ERROR_RESPONSES, Envelope, ok

router = APIRouter(prefix="/early-detection", tags=["Early Detection"], responses=ERROR_RESPONSES)

@router.post("/", response_model=Envelope[EarlyDetectionOut], status_code=201)
async def analyze_symptoms(
    data: EarlyDetectionCreate,
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db)
):
    """Rate the urgency of the reported symptoms and suggest next steps."""
    record = EarlyDetectionService(db).analyze(principal, data)
    return ok(EarlyDetectionOut.model_validate(record), "Symptom analysis completed")

@router.get("/", response_model=Envelope[List[EarlyDetectionOut]])
async def list_analyses(
    risk_level: Optional[Literal["low", "medium", "high"]] = None,
    severity: Optional[Severity] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db)
):
    records = EarlyDetectionService(db).list_analyses(
        principal, risk=risk_level, severity=severity, start_date=start_date, end_date=end_date
    )
    return ok([EarlyDetectionOut.model_validate(r) for r in records])

@router.get("/{detection_id}", response_model=Envelope[EarlyDetectionOut])
async def get_analysis(
    detection_id: str,
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db)
):
    return ok(EarlyDetectionOut.model_validate(EarlyDetectionService(db).get_analysis(principal, detection_id)))

@router.delete("/{detection_id}", response_model=Envelope[dict])
async def delete_analysis(
    detection_id: str,
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db)
):
    EarlyDetectionService(db).delete_analysis(principal, detection_id)
    return ok(message="Early detection record deleted")
