"""Appointment booking, listing and the status lifecycle.

Who may do what:

* only patients book, and only for themselves;
* a patient sees appointments they booked, a doctor those whose ``doctor_id``
  is either their user id or their profile id;
* status moves along ``STATUS_TRANSITIONS`` only: the doctor starts and
  completes a consultation, the patient or the doctor cancels a scheduled one;
* cancellation is the only form of deletion, rows are never removed.
"""
from collections import Counter
from datetime import datetime
from typing import Dict, List, Optional, Tuple
import logging

from sqlalchemy.orm import Session

from ..core.database import is_valid_id
from ..core.exceptions import AuthorizationError, ConflictError, NotFoundError, ValidationError
from ..core.security import Principal
from ..models.appointment import TERMINAL_STATUSES, Appointment, AppointmentStatus, SymptomSeverity, can_transition
from ..models.medication import Medication
from ..models.user import User
from ..schemas.appointment import (
    AppointmentCreate, AppointmentInsights, AppointmentOut, AppointmentSummary, AppointmentUpdate
)
from .adr_detection import check_adverse_reactions, check_drug_interactions
from .ai_insights import generate_insights
from .doctor_directory import DEFAULT_SPECIALIZATION, DoctorDirectory, DoctorRef
from .predictions import get_appointment_predictions

logger = logging.getLogger(__name__)

PATIENT_EDITABLE_FIELDS = frozenset({
    "symptoms", "severity", "duration", "reason",
    "previous_treatments", "allergies", "current_medications", "additional_notes",
})

DOCTOR_EDITABLE_FIELDS = PATIENT_EDITABLE_FIELDS | {"diagnosis", "prescription", "doctor_notes"}

_SEVERITY_ORDER = [SymptomSeverity.MILD.value, SymptomSeverity.MODERATE.value, SymptomSeverity.SEVERE.value]

def scheduled_at(appointment: Appointment) -> datetime:
    return datetime.combine(appointment.date, datetime.strptime(appointment.time, "%H:%M").time())

def overall_severity(symptoms: List[dict]) -> str:
    levels = [s.get("severity", SymptomSeverity.MILD.value) for s in symptoms]
    return max(levels, key=_SEVERITY_ORDER.index)

class AppointmentService:
    def __init__(self, db: Session):
        self.db = db
        self.directory = DoctorDirectory(db)

    def create_appointment(self, principal: Principal, data: AppointmentCreate) -> AppointmentOut:
        if not principal.is_patient:
            raise AuthorizationError("Only patients can book appointments")

        patient = self.db.query(User).filter(User.id == principal.user_id).first()
        if not patient:
            raise NotFoundError("User not found")

        doctor = self.directory.resolve(data.doctor_id)
        if doctor is None:
            raise NotFoundError("Doctor not found")

        symptoms = [s.model_dump(mode="json") for s in data.symptoms]
        info = data.additional_info

        appointment = Appointment(
            patient_id=patient.id,
            doctor_id=doctor.id,
            doctor_name=doctor.name,
            patient_name=patient.name,
            date=data.date,
            time=data.time,
            symptoms=symptoms,
            severity=data.severity or overall_severity(symptoms),
            duration=data.duration or "",
            reason=data.reason or "",
            allergies=info.allergies if info else None,
            current_medications=info.current_medications if info else None,
            previous_treatments=info.previous_treatments if info else None,
            additional_notes=info.additional_notes if info else None,
            status=AppointmentStatus.SCHEDULED,
        )
        self.db.add(appointment)
        self.db.commit()
        self.db.refresh(appointment)

        logger.info(
            f"Appointment {appointment.id} booked by patient {patient.id} "
            f"with {'seed' if doctor.is_seed else 'registered'} doctor {doctor.id}"
        )
        return self._present(appointment, principal, {doctor.id: doctor})

    def list_appointments(
        self,
        principal: Principal,
        status: Optional[AppointmentStatus] = None,
        when: Optional[str] = None,
    ) -> List[AppointmentOut]:
        appointments = self._owned(principal, status)

        if when:
            now = datetime.now()
            if when == "upcoming":
                appointments = [a for a in appointments if scheduled_at(a) >= now]
            elif when == "past":
                appointments = [a for a in appointments if scheduled_at(a) < now]

        doctors: Dict[str, Optional[DoctorRef]] = {}
        return [self._present(a, principal, doctors) for a in appointments]

    def summarize(self, principal: Principal) -> AppointmentSummary:
        appointments = self._owned(principal)
        now = datetime.now()
        upcoming = sum(1 for a in appointments if scheduled_at(a) >= now)
        by_status = Counter(AppointmentStatus(a.status).value for a in appointments)
        return AppointmentSummary(
            total=len(appointments),
            upcoming=upcoming,
            past=len(appointments) - upcoming,
            by_status={s.value: by_status.get(s.value, 0) for s in AppointmentStatus},
        )

    def get_appointment(self, principal: Principal, appointment_id: str) -> AppointmentOut:
        appointment = self._load(appointment_id)
        self._require_party(principal, appointment)
        return self._present(appointment, principal, {})

    def update_appointment(
        self,
        principal: Principal,
        appointment_id: str,
        update: AppointmentUpdate,
    ) -> Tuple[AppointmentOut, str]:
        appointment = self._load(appointment_id)
        is_patient, is_doctor = self._require_party(principal, appointment)

        fields = update.model_dump(mode="json", exclude_unset=True)
        if "status" in fields:
            if len(fields) > 1:
                raise ValidationError("A status change cannot be combined with other field updates")
            if fields["status"] is None:
                raise ValidationError("Status must not be null")
            target = AppointmentStatus(fields["status"])
            self._transition(appointment, target, principal, is_patient, is_doctor)
            return self._present(appointment, principal, {}), f"Appointment {target.value} successfully"

        if not fields:
            raise ValidationError("No fields to update")

        if is_doctor:
            allowed = DOCTOR_EDITABLE_FIELDS
        else:
            if AppointmentStatus(appointment.status) != AppointmentStatus.SCHEDULED:
                raise ConflictError("Appointment details can only be changed before the consultation")
            allowed = PATIENT_EDITABLE_FIELDS

        # symptoms may be replaced but never cleared
        changes = {
            key: value for key, value in fields.items()
            if key in allowed and not (key == "symptoms" and value is None)
        }
        if not changes:
            raise ValidationError("No updatable fields supplied")

        for key, value in changes.items():
            setattr(appointment, key, value)
        self.db.commit()
        self.db.refresh(appointment)

        logger.info(
            f"Appointment {appointment.id} fields {sorted(changes)} updated by "
            f"{principal.role.value} {principal.user_id}"
        )
        return self._present(appointment, principal, {}), "Appointment updated successfully"

    def cancel_appointment(self, principal: Principal, appointment_id: str) -> AppointmentOut:
        """Soft delete: the appointment is marked cancelled and kept."""
        appointment = self._load(appointment_id)
        is_patient, is_doctor = self._require_party(principal, appointment)
        self._transition(appointment, AppointmentStatus.CANCELLED, principal, is_patient, is_doctor)
        return self._present(appointment, principal, {})

    def insights(self, principal: Principal, appointment_id: str) -> AppointmentInsights:
        appointment = self._load(appointment_id)
        self._require_party(principal, appointment)

        medications = [
            m.name for m in self.db.query(Medication).filter(
                Medication.user_id == appointment.patient_id
            ).all()
        ]
        symptoms = appointment.symptoms or []
        return AppointmentInsights(
            predictions=get_appointment_predictions(symptoms),
            consultation=generate_insights(symptoms) if symptoms else None,
            adverse_reaction_warnings=check_adverse_reactions(medications, symptoms),
            drug_interaction_warnings=check_drug_interactions(medications),
        )

    def _owned(self, principal: Principal, status: Optional[AppointmentStatus] = None) -> List[Appointment]:
        query = self.db.query(Appointment)
        if principal.is_patient:
            query = query.filter(Appointment.patient_id == principal.user_id)
        elif principal.is_doctor:
            query = query.filter(Appointment.doctor_id.in_(sorted(principal.doctor_ids())))
        else:
            raise AuthorizationError("Only patients and doctors have appointments")

        if status is not None:
            query = query.filter(Appointment.status == status)
        return query.order_by(Appointment.date, Appointment.time, Appointment.created_at).all()

    def _load(self, appointment_id: str) -> Appointment:
        if not is_valid_id(appointment_id):
            raise ValidationError(f"'{appointment_id}' is not a valid appointment ID")

        appointment = self.db.query(Appointment).filter(
            Appointment.id == appointment_id.lower()
        ).first()
        if not appointment:
            raise NotFoundError("Appointment not found")
        return appointment

    def _require_party(self, principal: Principal, appointment: Appointment) -> Tuple[bool, bool]:
        is_patient = principal.is_patient and appointment.patient_id == principal.user_id
        is_doctor = principal.is_doctor and appointment.doctor_id in principal.doctor_ids()
        if not (is_patient or is_doctor):
            raise AuthorizationError("You are not authorized to access this appointment")
        return is_patient, is_doctor

    def _transition(
        self,
        appointment: Appointment,
        target: AppointmentStatus,
        principal: Principal,
        is_patient: bool,
        is_doctor: bool,
    ) -> None:
        # either party may cancel; every other move belongs to the doctor
        if target != AppointmentStatus.CANCELLED and not is_doctor:
            raise AuthorizationError(f"Only the doctor can mark an appointment as {target.value}")

        current = AppointmentStatus(appointment.status)
        if current in TERMINAL_STATUSES:
            raise ConflictError(f"Appointment is already {current.value}")
        if not can_transition(current, target):
            raise ConflictError(
                f"Cannot change appointment status from {current.value} to {target.value}"
            )

        # the row must still hold the status the check above was made against
        updated = self.db.query(Appointment).filter(
            Appointment.id == appointment.id,
            Appointment.status == current
        ).update({"status": target}, synchronize_session="fetch")
        if not updated:
            self.db.rollback()
            raise ConflictError("Appointment status was changed by another request")
        self.db.commit()
        self.db.refresh(appointment)

        logger.info(
            f"Appointment {appointment.id} status {current.value} -> {target.value} "
            f"by {principal.role.value} {principal.user_id}"
        )

    def _present(
        self,
        appointment: Appointment,
        principal: Principal,
        doctors: Dict[str, Optional[DoctorRef]],
    ) -> AppointmentOut:
        out = AppointmentOut.model_validate(appointment)

        if principal.is_doctor:
            patient = self.db.query(User).filter(User.id == appointment.patient_id).first()
            return out.model_copy(update={
                "patient_display_name": patient.name if patient else appointment.patient_name,
                "patient_email": patient.email if patient else "",
            })

        if appointment.doctor_id not in doctors:
            doctors[appointment.doctor_id] = self.directory.resolve(appointment.doctor_id)
        doctor = doctors[appointment.doctor_id]
        if doctor is None:
            return out.model_copy(update={
                "doctor_display_name": appointment.doctor_name,
                "doctor_email": "",
                "doctor_specialization": DEFAULT_SPECIALIZATION,
                "doctor_image_url": "",
            })
        return out.model_copy(update={
            "doctor_display_name": doctor.name or appointment.doctor_name,
            "doctor_email": doctor.email or "",
            "doctor_specialization": doctor.specialization or DEFAULT_SPECIALIZATION,
            "doctor_image_url": doctor.image_url or "",
        })
