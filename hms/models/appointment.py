from sqlalchemy import Column, String, ForeignKey, DateTime, Date, Text, JSON, Enum as SQLEnum
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
import enum

from ..core.database import Base, generate_id

class AppointmentStatus(str, enum.Enum):
    SCHEDULED = "scheduled"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

class SymptomSeverity(str, enum.Enum):
    MILD = "mild"
    MODERATE = "moderate"
    SEVERE = "severe"

# Directed edges of the appointment lifecycle. Terminal states have no entry.
STATUS_TRANSITIONS = {
    AppointmentStatus.SCHEDULED: {AppointmentStatus.IN_PROGRESS, AppointmentStatus.CANCELLED},
    AppointmentStatus.IN_PROGRESS: {AppointmentStatus.COMPLETED},
}

TERMINAL_STATUSES = {AppointmentStatus.COMPLETED, AppointmentStatus.CANCELLED}

def can_transition(current: AppointmentStatus, target: AppointmentStatus) -> bool:
    return target in STATUS_TRANSITIONS.get(AppointmentStatus(current), set())

class Appointment(Base):
    __tablename__ = "appointments"

    id = Column(String(24), primary_key=True, default=generate_id)

    # Set once at creation
    patient_id = Column(String(24), ForeignKey("users.id"), nullable=False, index=True)
    # Either a seed doctor id or a registered doctor's user id
    doctor_id = Column(String(24), nullable=False, index=True)

    # Display snapshots taken at booking time
    doctor_name = Column(String(200), nullable=False)
    patient_name = Column(String(200), nullable=False)

    # Appointment details
    date = Column(Date, nullable=False, index=True)
    time = Column(String(5), nullable=False)
    symptoms = Column(JSON, nullable=False, default=list)
    severity = Column(String(20), nullable=True)
    duration = Column(String(100), nullable=True)
    reason = Column(Text, nullable=True)
    status = Column(
        SQLEnum(AppointmentStatus, values_callable=lambda e: [m.value for m in e]),
        default=AppointmentStatus.SCHEDULED,
        nullable=False,
        index=True,
    )

    # Additional information supplied by the patient
    allergies = Column(Text, nullable=True)
    current_medications = Column(Text, nullable=True)
    previous_treatments = Column(Text, nullable=True)
    additional_notes = Column(Text, nullable=True)

    # Consultation outcome, written by the doctor
    diagnosis = Column(Text, nullable=True)
    prescription = Column(Text, nullable=True)
    doctor_notes = Column(Text, nullable=True)

    # Tracking
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    # Relationships
    patient = relationship("User")

    def __repr__(self):
        return f"<Appointment(id={self.id}, patient_id={self.patient_id}, doctor_id={self.doctor_id}, status='{self.status}')>"
