from typing import List, Optional
from pydantic import BaseModel

class ProviderRead(BaseModel):
    first_name: Optional[str]
    last_name: Optional[str]
    provider_specialty: Optional[str]

class ProviderList(BaseModel):
    providers: List[ProviderRead]
