"""Doctor Pydantic schemas"""
from pydantic import BaseModel, ConfigDict


class Doctor(BaseModel):
    """Clinic doctor"""
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    specialty: str
