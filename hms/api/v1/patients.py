from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...core.database import get_db
from ...core.security import Principal
from ...api.deps import get_patient
from ...services.profile_service import ProfileService
from ...schemas.patient import PatientProfileOut, PatientProfileUpdate
from ...schemas.common import ERROR_RESPONSES, Envelope, ok

router = APIRouter(prefix="/patients", tags=["Patients"], responses=ERROR_RESPONSES)

@router.get("/me", response_model=Envelope[PatientProfileOut])
async def my_profile(
    principal: Principal = Depends(get_patient),
    db: Session = Depends(get_db)
):
    return ok(ProfileService(db).patient_profile(principal))

@router.patch("/me", response_model=Envelope[PatientProfileOut])
async def update_my_profile(
    data: PatientProfileUpdate,
    principal: Principal = Depends(get_patient),
    db: Session = Depends(get_db)
):
    return ok(ProfileService(db).update_patient_profile(principal, data), "Profile updated successfully")
