from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...core.database import get_db
from ...core.security import Principal
from ...api.deps import get_patient
from ...services.medication_service import MedicationService
from ...schemas.medication import InteractionReport, MedicationIn, MedicationOut
from ...schemas.common import ERROR_RESPONSES, Envelope, ok

router = APIRouter(prefix="/medications", tags=["Medications"], responses=ERROR_RESPONSES)

@router.get("/", response_model=Envelope[List[MedicationOut]])
async def list_medications(
    principal: Principal = Depends(get_patient),
    db: Session = Depends(get_db)
):
    medications = MedicationService(db).list_medications(principal)
    return ok([MedicationOut.model_validate(m) for m in medications])

@router.post("/", response_model=Envelope[MedicationOut], status_code=201)
async def add_medication(
    data: MedicationIn,
    principal: Principal = Depends(get_patient),
    db: Session = Depends(get_db)
):
    medication = MedicationService(db).add_medication(principal, data)
    return ok(MedicationOut.model_validate(medication), "Medication added successfully")

@router.get("/interactions", response_model=Envelope[InteractionReport])
async def medication_interactions(
    principal: Principal = Depends(get_patient),
    db: Session = Depends(get_db)
):
    """Known interactions between the caller's current medications."""
    return ok(MedicationService(db).interactions(principal))

@router.put("/{medication_id}", response_model=Envelope[MedicationOut])
async def update_medication(
    medication_id: str,
    data: MedicationIn,
    principal: Principal = Depends(get_patient),
    db: Session = Depends(get_db)
):
    medication = MedicationService(db).update_medication(principal, medication_id, data)
    return ok(MedicationOut.model_validate(medication), "Medication updated successfully")

@router.delete("/{medication_id}", response_model=Envelope[dict])
async def delete_medication(
    medication_id: str,
    principal: Principal = Depends(get_patient),
    db: Session = Depends(get_db)
):
    MedicationService(db).delete_medication(principal, medication_id)
    return ok(message="Medication deleted successfully")
