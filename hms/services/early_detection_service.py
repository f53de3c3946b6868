from datetime import date, datetime, time
from typing import List, Optional
import logging

from sqlalchemy.orm import Session

from ..core.database import is_valid_id
from ..core.exceptions import NotFoundError, ValidationError
from ..core.security import Principal
from ..models.early_detection import EarlyDetection
from ..schemas.early_detection import EarlyDetectionCreate
from .early_detection import (
    calculate_emergency_rating, estimate_appointment_duration, generate_recommendations,
    predict_possible_conditions, risk_level
)

logger = logging.getLogger(__name__)

class EarlyDetectionService:
    def __init__(self, db: Session):
        self.db = db

    def analyze(self, principal: Principal, data: EarlyDetectionCreate) -> EarlyDetection:
        """Score the reported symptoms and store the analysis for the caller."""
        symptoms = [s.strip() for s in data.symptoms if s.strip()]
        if not symptoms:
            raise ValidationError("At least one symptom is required")

        rating = calculate_emergency_rating(symptoms, data.severity, data.age, data.gender)
        conditions = predict_possible_conditions(symptoms, data.severity)

        record = EarlyDetection(
            user_id=principal.user_id,
            symptoms=symptoms,
            severity=data.severity,
            age=data.age,
            gender=data.gender,
            medical_history=data.medical_history,
            family_history=data.family_history,
            lifestyle=data.lifestyle,
            status="completed",
            emergency_rating=rating,
            risk_level=risk_level(rating),
            potential_conditions=conditions,
            recommendations=generate_recommendations(symptoms, data.severity),
            estimated_duration=estimate_appointment_duration(symptoms, data.severity, conditions),
        )
        self.db.add(record)
        self.db.commit()
        self.db.refresh(record)

        logger.info(f"Early detection {record.id} for user {principal.user_id}: rating {rating}")
        return record

    def list_analyses(
        self,
        principal: Principal,
        risk: Optional[str] = None,
        severity: Optional[str] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> List[EarlyDetection]:
        query = self.db.query(EarlyDetection).filter(EarlyDetection.user_id == principal.user_id)
        if risk:
            query = query.filter(EarlyDetection.risk_level == risk)
        if severity:
            query = query.filter(EarlyDetection.severity == severity)
        if start_date:
            query = query.filter(EarlyDetection.created_at >= datetime.combine(start_date, time.min))
        if end_date:
            query = query.filter(EarlyDetection.created_at <= datetime.combine(end_date, time.max))
        return query.order_by(EarlyDetection.created_at.desc()).all()

    def get_analysis(self, principal: Principal, detection_id: str) -> EarlyDetection:
        if not is_valid_id(detection_id):
            raise ValidationError(f"'{detection_id}' is not a valid record ID")

        record = self.db.query(EarlyDetection).filter(
            EarlyDetection.id == detection_id.lower(),
            EarlyDetection.user_id == principal.user_id
        ).first()
        if not record:
            raise NotFoundError("Early detection record not found")
        return record

    def delete_analysis(self, principal: Principal, detection_id: str) -> None:
        record = self.get_analysis(principal, detection_id)
        self.db.delete(record)
        self.db.commit()
