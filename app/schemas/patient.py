from datetime import date
from typing import List, Optional
from pydantic import BaseModel

class PatientRead(BaseModel):
    patient_id: int
    first_name: Optional[str]
    last_name: Optional[str]
    date_of_birth: Optional[date]

class PatientList(BaseModel):
    patients: List[PatientRead]
