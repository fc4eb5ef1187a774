"""Doctor directory endpoints"""
from typing import List
from fastapi import APIRouter, Depends
from app.dependencies import get_doctor_store
from app.doctors.repository import DoctorStore
from app.doctors.schemas import Doctor

router = APIRouter(
    prefix="/api",
    tags=["doctors"],
)


@router.get("/doctors", response_model=List[Doctor])
async def list_doctors(store: DoctorStore = Depends(get_doctor_store)):
    """List the clinic's doctors."""
    return store.list_all()
