from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...core.database import get_db
from ...core.security import Principal
from ...api.deps import get_current_principal
from ...services.adr_service import ADRService, analyze
from ...schemas.adr import ADRDetectRequest, ADRDetectResponse, ADRReportCreate, ADRReportOut
from ...schemas.common import ERROR_RESPONSES, Envelope, ok

router = APIRouter(prefix="/adr", tags=["Adverse Drug Reactions"], responses=ERROR_RESPONSES)

@router.post("/detect", response_model=Envelope[ADRDetectResponse])
async def detect(
    request: ADRDetectRequest,
    _: Principal = Depends(get_current_principal)
):
    """Screen a comma-separated reaction description against a medication."""
    return ok(analyze(request.medication, request.reaction))

@router.post("/", response_model=Envelope[ADRReportOut], status_code=201)
async def create_report(
    data: ADRReportCreate,
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db)
):
    report = ADRService(db).create_report(principal, data)
    return ok(ADRReportOut.model_validate(report), "ADR report submitted successfully")

@router.get("/", response_model=Envelope[List[ADRReportOut]])
async def list_reports(
    patient_id: Optional[str] = None,
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db)
):
    """Own reports, newest first. Doctors may pass ``patient_id``."""
    reports = ADRService(db).list_reports(principal, patient_id)
    return ok([ADRReportOut.model_validate(r) for r in reports])
