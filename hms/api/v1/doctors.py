from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ...core.database import get_db
from ...core.exceptions import NotFoundError
from ...core.security import Principal
from ...api.deps import get_doctor
from ...services.doctor_directory import DoctorDirectory
from ...services.profile_service import ProfileService
from ...schemas.doctor import DoctorOut, DoctorProfileUpdate
from ...schemas.common import ERROR_RESPONSES, Envelope, ok

router = APIRouter(prefix="/doctors", tags=["Doctors"], responses=ERROR_RESPONSES)

@router.get("/", response_model=Envelope[List[DoctorOut]])
async def list_doctors(
    specialization: Optional[str] = None,
    available: Optional[bool] = None,
    include_seed: bool = True,
    limit: Optional[int] = Query(None, ge=1, le=100),
    db: Session = Depends(get_db)
):
    """Seed doctors followed by registered doctors."""
    doctors = DoctorDirectory(db).list_doctors(
        specialization=specialization,
        available=available,
        include_seed=include_seed,
        limit=limit,
    )
    return ok([d.to_schema() for d in doctors])

@router.get("/me", response_model=Envelope[DoctorOut])
async def my_profile(
    principal: Principal = Depends(get_doctor),
    db: Session = Depends(get_db)
):
    return ok(ProfileService(db).doctor_profile(principal))

@router.patch("/me", response_model=Envelope[DoctorOut])
async def update_my_profile(
    data: DoctorProfileUpdate,
    principal: Principal = Depends(get_doctor),
    db: Session = Depends(get_db)
):
    return ok(ProfileService(db).update_doctor_profile(principal, data), "Profile updated successfully")

@router.get("/{doctor_id}", response_model=Envelope[DoctorOut])
async def get_doctor_by_id(
    doctor_id: str,
    db: Session = Depends(get_db)
):
    doctor = DoctorDirectory(db).resolve(doctor_id)
    if doctor is None:
        raise NotFoundError("Doctor not found")
    return ok(doctor.to_schema())
