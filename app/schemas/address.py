from typing import Optional
from pydantic import BaseModel, ConfigDict


class AddressDTO(BaseModel):
    model_config = ConfigDict(extra='ignore', from_attributes=True)

    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    zipcode: Optional[str] = None
