from typing import Optional
from sqlmodel import Field, SQLModel
from app.models.base import IDModel, TimestampModel


class Address(IDModel, TimestampModel, SQLModel, table=True):
    """Postal address, at most one per user."""

    __tablename__ = 'addresses'

    user_id: str = Field(foreign_key='users.id', index=True, unique=True)
    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    zipcode: Optional[str] = None
