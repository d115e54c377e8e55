"""Request and response bodies for the users API.

Wire names are camelCase (``firstName``); Python code uses the snake_case
attribute names. Both are accepted on input.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from app.models.enums import UserRole
from app.schemas.address import AddressDTO


class UserRequest(BaseModel):
    """Proposed or submitted user, before anything checks or stores it.

    Every field is optional and defaults to ``None``. Assigning an attribute
    is not validated, so any value is accepted and only that field changes.
    Instances compare equal when all fields are equal.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra='ignore',
    )

    id: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    role: Optional[UserRole] = None
    address: Optional[AddressDTO] = None


class UserResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    role: UserRole
    address: Optional[AddressDTO] = None
