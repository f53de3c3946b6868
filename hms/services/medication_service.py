from typing import List
import logging

from sqlalchemy.orm import Session

from ..core.database import is_valid_id
from ..core.exceptions import NotFoundError, ValidationError
from ..core.security import Principal
from ..models.medication import Medication
from ..schemas.medication import InteractionReport, MedicationIn
from .adr_detection import check_drug_interactions

logger = logging.getLogger(__name__)

class MedicationService:
    """A patient's own medication list. Rows of other users are reported as missing."""

    def __init__(self, db: Session):
        self.db = db

    def list_medications(self, principal: Principal) -> List[Medication]:
        return self.db.query(Medication).filter(
            Medication.user_id == principal.user_id
        ).order_by(Medication.start_date.desc(), Medication.name).all()

    def add_medication(self, principal: Principal, data: MedicationIn) -> Medication:
        medication = Medication(user_id=principal.user_id, **data.model_dump())
        self.db.add(medication)
        self.db.commit()
        self.db.refresh(medication)
        logger.info(f"Medication {medication.id} added for user {principal.user_id}")
        return medication

    def update_medication(self, principal: Principal, medication_id: str, data: MedicationIn) -> Medication:
        medication = self._load(principal, medication_id)
        for key, value in data.model_dump().items():
            setattr(medication, key, value)
        self.db.commit()
        self.db.refresh(medication)
        return medication

    def delete_medication(self, principal: Principal, medication_id: str) -> None:
        medication = self._load(principal, medication_id)
        self.db.delete(medication)
        self.db.commit()
        logger.info(f"Medication {medication_id} removed for user {principal.user_id}")

    def interactions(self, principal: Principal) -> InteractionReport:
        names = [m.name for m in self.list_medications(principal)]
        return InteractionReport(medications=names, warnings=check_drug_interactions(names))

    def _load(self, principal: Principal, medication_id: str) -> Medication:
        if not is_valid_id(medication_id):
            raise ValidationError(f"'{medication_id}' is not a valid medication ID")

        medication = self.db.query(Medication).filter(
            Medication.id == medication_id.lower(),
            Medication.user_id == principal.user_id
        ).first()
        if not medication:
            raise NotFoundError("Medication not found")
        return medication
