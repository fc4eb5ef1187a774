"""Seeded doctor directory"""
from typing import Dict, Iterable, List, Optional
from app.doctors.schemas import Doctor

SEED_DOCTORS = [
    Doctor(id=1, name="Dr. Sarah Smith", specialty="Orthodontics"),
    Doctor(id=2, name="Dr. John Wilson", specialty="General Dentistry"),
    Doctor(id=3, name="Dr. Maria Garcia", specialty="Periodontics"),
    Doctor(id=4, name="Dr. James Chen", specialty="Endodontics"),
]


class DoctorStore:
    """Read-only in-memory doctor list"""

    def __init__(self, doctors: Optional[Iterable[Doctor]] = None):
        self._doctors: Dict[int, Doctor] = {
            doctor.id: doctor for doctor in (SEED_DOCTORS if doctors is None else doctors)
        }

    def list_all(self) -> List[Doctor]:
        return list(self._doctors.values())
