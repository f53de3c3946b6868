"""Own-profile reads and edits for patients and registered doctors."""
from sqlalchemy.orm import Session

from ..core.exceptions import AuthorizationError, NotFoundError
from ..core.security import Principal
from ..models.doctor import Doctor
from ..models.patient import Patient
from ..models.user import User
from ..schemas.doctor import DoctorOut, DoctorProfileUpdate
from ..schemas.patient import PatientProfileOut, PatientProfileUpdate
from .doctor_directory import DoctorDirectory, RegisteredDoctorRef

class ProfileService:
    def __init__(self, db: Session):
        self.db = db

    def patient_profile(self, principal: Principal) -> PatientProfileOut:
        user, patient = self._patient(principal)
        return self._patient_out(user, patient)

    def update_patient_profile(self, principal: Principal, data: PatientProfileUpdate) -> PatientProfileOut:
        user, patient = self._patient(principal)
        changes = data.model_dump(exclude_unset=True)

        name = changes.pop("name", None)
        if name:
            user.name = name.strip()
        for key, value in changes.items():
            setattr(patient, key, value)

        self.db.commit()
        self.db.refresh(user)
        self.db.refresh(patient)
        return self._patient_out(user, patient)

    def doctor_profile(self, principal: Principal) -> DoctorOut:
        doctor = DoctorDirectory(self.db).resolve(principal.user_id)
        if doctor is None:
            raise NotFoundError("Doctor profile not found")
        return doctor.to_schema()

    def update_doctor_profile(self, principal: Principal, data: DoctorProfileUpdate) -> DoctorOut:
        if principal.is_seed:
            raise AuthorizationError("Seed doctor profiles are read-only")

        user = self.db.query(User).filter(User.id == principal.user_id).first()
        if not user:
            raise NotFoundError("User not found")
        profile = user.doctor
        if profile is None:
            profile = Doctor(user_id=user.id, specialization="General Medicine")
            self.db.add(profile)

        for key, value in data.model_dump(exclude_unset=True).items():
            setattr(profile, key, value)

        self.db.commit()
        self.db.refresh(user)
        return RegisteredDoctorRef(user, user.doctor).to_schema()

    def _patient(self, principal: Principal):
        user = self.db.query(User).filter(User.id == principal.user_id).first()
        if not user:
            raise NotFoundError("User not found")
        patient = user.patient
        if patient is None:
            patient = Patient(user_id=user.id, allergies=[])
            self.db.add(patient)
            self.db.commit()
            self.db.refresh(patient)
        return user, patient

    @staticmethod
    def _patient_out(user: User, patient: Patient) -> PatientProfileOut:
        return PatientProfileOut(
            id=patient.id,
            user_id=user.id,
            name=user.name,
            email=user.email,
            phone=patient.phone,
            date_of_birth=patient.date_of_birth,
            gender=patient.gender,
            blood_group=patient.blood_group,
            height=patient.height,
            weight=patient.weight,
            allergies=patient.allergies or [],
            emergency_contact=patient.emergency_contact,
        )
