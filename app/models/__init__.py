from app.models.base import IDModel, TimestampModel
from app.models.enums import UserRole
from app.models.user import User
from app.models.address import Address

__all__ = [
    'IDModel',
    'TimestampModel',
    'UserRole',
    'User',
    'Address',
]
