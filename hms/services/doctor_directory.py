"""Doctor lookup across the two sources: seed records and registered users.

Seed records are always consulted first. A registered doctor is addressed by
their user id; a doctor profile id is accepted too and normalised to the
owning user id, so appointments always store one canonical id per doctor.
"""
from dataclasses import dataclass
from typing import List, Optional, Union
from sqlalchemy.orm import Session

from ..models.doctor import Doctor, DEFAULT_AVAILABILITY
from ..models.user import User
from ..core.security import UserRole
from ..schemas.doctor import DoctorOut
from .seed_doctors import SeedDoctor, all_seed_doctors, get_seed_doctor

DEFAULT_SPECIALIZATION = "General"

@dataclass(frozen=True)
class SeedDoctorRef:
    record: SeedDoctor
    is_seed = True

    @property
    def id(self) -> str:
        return self.record.id

    @property
    def name(self) -> str:
        return self.record.name

    @property
    def email(self) -> str:
        return self.record.email

    @property
    def specialization(self) -> str:
        return self.record.specialization

    @property
    def image_url(self) -> str:
        return self.record.image_url

    @property
    def is_available(self) -> bool:
        return self.record.is_available

    def to_schema(self) -> DoctorOut:
        r = self.record
        return DoctorOut(
            id=r.id,
            name=r.name,
            email=r.email,
            specialization=r.specialization,
            experience=r.experience,
            qualifications=r.qualifications,
            license_number=r.license_number,
            availability=r.availability,
            about=r.about,
            image_url=r.image_url,
            consultation_fee=r.consultation_fee,
            rating=r.rating,
            education=r.education,
            awards=r.awards,
            languages=r.languages,
            is_available=r.is_available,
            is_seed=True,
        )

@dataclass(frozen=True)
class RegisteredDoctorRef:
    user: User
    profile: Optional[Doctor] = None
    is_seed = False

    @property
    def id(self) -> str:
        return self.user.id

    @property
    def name(self) -> str:
        return self.user.name

    @property
    def email(self) -> str:
        return self.user.email

    @property
    def specialization(self) -> str:
        if self.profile and self.profile.specialization:
            return self.profile.specialization
        return DEFAULT_SPECIALIZATION

    @property
    def image_url(self) -> str:
        return (self.profile.image_url if self.profile else "") or ""

    @property
    def is_available(self) -> bool:
        return bool(self.profile.is_available) if self.profile else False

    def to_schema(self) -> DoctorOut:
        p = self.profile
        return DoctorOut(
            id=self.user.id,
            name=self.user.name,
            email=self.user.email,
            specialization=self.specialization,
            experience=(p.experience if p else 0) or 0,
            qualifications=(p.qualifications if p else "") or "",
            license_number=(p.license_number if p else "") or "",
            availability=(p.availability if p and p.availability else DEFAULT_AVAILABILITY),
            about=(p.about if p else "") or "",
            image_url=self.image_url,
            consultation_fee=(p.consultation_fee if p else 0) or 0,
            rating=(p.rating if p else 4.0) or 4.0,
            education=(p.education if p else []) or [],
            awards=(p.awards if p else []) or [],
            languages=(p.languages if p else []) or [],
            is_available=self.is_available,
            is_seed=False,
        )

DoctorRef = Union[SeedDoctorRef, RegisteredDoctorRef]

class DoctorDirectory:
    def __init__(self, db: Session):
        self.db = db

    def resolve(self, doctor_id: str) -> Optional[DoctorRef]:
        """Resolve ``doctor_id`` against seed records, then registered doctors."""
        if not doctor_id:
            return None

        seed = get_seed_doctor(doctor_id)
        if seed:
            return SeedDoctorRef(seed)

        user = self.db.query(User).filter(
            User.id == doctor_id,
            User.role == UserRole.DOCTOR
        ).first()
        if user:
            return RegisteredDoctorRef(user, user.doctor)

        profile = self.db.query(Doctor).filter(Doctor.id == doctor_id).first()
        if profile and profile.user and profile.user.role == UserRole.DOCTOR:
            return RegisteredDoctorRef(profile.user, profile)

        return None

    def list_doctors(
        self,
        specialization: Optional[str] = None,
        available: Optional[bool] = None,
        include_seed: bool = True,
        limit: Optional[int] = None,
    ) -> List[DoctorRef]:
        refs: List[DoctorRef] = []
        if include_seed:
            refs.extend(SeedDoctorRef(d) for d in all_seed_doctors())

        users = self.db.query(User).filter(
            User.role == UserRole.DOCTOR,
            User.is_active == True  # noqa: E712
        ).order_by(User.created_at, User.id).all()
        refs.extend(RegisteredDoctorRef(u, u.doctor) for u in users)

        if specialization:
            needle = specialization.lower()
            refs = [r for r in refs if needle in r.specialization.lower()]
        if available is not None:
            refs = [r for r in refs if r.is_available == available]
        if limit and limit > 0:
            refs = refs[:limit]
        return refs
