from typing import List, Optional
import logging

from sqlalchemy.orm import Session

from ..core.database import is_valid_id
from ..core.exceptions import AuthorizationError, ValidationError
from ..core.security import Principal
from ..models.adr_report import ADRReport
from ..schemas.adr import ADRDetectResponse, ADRReportCreate
from .adr_detection import calculate_adr_severity, detect_adverse_reactions, split_reactions

logger = logging.getLogger(__name__)

def analyze(medication: str, reaction: str) -> ADRDetectResponse:
    symptoms = split_reactions(reaction)
    reactions = detect_adverse_reactions(medication, symptoms)
    return ADRDetectResponse(
        symptoms=symptoms,
        reactions=reactions,
        severity=calculate_adr_severity(reactions),
    )

class ADRService:
    def __init__(self, db: Session):
        self.db = db

    def create_report(self, principal: Principal, data: ADRReportCreate) -> ADRReport:
        if not principal.is_patient:
            raise AuthorizationError("Only patients can submit adverse reaction reports")

        result = analyze(data.medication, data.reaction)
        report = ADRReport(
            patient_id=principal.user_id,
            medication=data.medication,
            reaction=data.reaction,
            severity=data.severity,
            date=data.date,
            description=data.description,
            status="pending",
            detected_reactions=[r.model_dump() for r in result.reactions],
            computed_severity=result.severity,
        )
        self.db.add(report)
        self.db.commit()
        self.db.refresh(report)

        logger.info(
            f"ADR report {report.id} for {data.medication} filed by {principal.user_id}; "
            f"{len(result.reactions)} reaction(s), computed severity {result.severity}"
        )
        return report

    def list_reports(self, principal: Principal, patient_id: Optional[str] = None) -> List[ADRReport]:
        owner = principal.user_id
        if patient_id and patient_id != principal.user_id:
            if not principal.is_doctor:
                raise AuthorizationError("You can only view your own reports")
            if not is_valid_id(patient_id):
                raise ValidationError(f"'{patient_id}' is not a valid patient ID")
            owner = patient_id.lower()

        return self.db.query(ADRReport).filter(
            ADRReport.patient_id == owner
        ).order_by(ADRReport.created_at.desc(), ADRReport.date.desc()).all()
