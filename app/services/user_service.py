from typing import Optional
from loguru import logger
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from app.core.config import settings
from app.models.address import Address
from app.models.base import utc_now
from app.models.enums import UserRole
from app.models.user import User
from app.schemas.address import AddressDTO
from app.schemas.user import UserRequest, UserResponse

_SCALAR_FIELDS = ('first_name', 'last_name', 'email', 'phone')
_ADDRESS_FIELDS = ('street', 'city', 'state', 'country', 'zipcode')


class UserNotFoundError(LookupError):
    pass


class UserConflictError(ValueError):
    pass


class InvalidUserRequestError(ValueError):
    pass


def get_user(session: Session, user_id: str) -> Optional[User]:
    return session.exec(select(User).where(User.id == user_id)).first()


def require_user(session: Session, user_id: str) -> User:
    user = get_user(session, user_id)
    if not user:
        raise UserNotFoundError(user_id)
    return user


def list_users(session: Session, limit: Optional[int] = 50, offset: int = 0) -> list[User]:
    statement = select(User).order_by(User.created_at, User.id)
    if offset:
        statement = statement.offset(offset)
    if limit is not None:
        statement = statement.limit(limit)
    return list(session.exec(statement).all())


def get_address(session: Session, user_id: str) -> Optional[Address]:
    return session.exec(select(Address).where(Address.user_id == user_id)).first()


def to_user_response(session: Session, user: User) -> UserResponse:
    address = get_address(session, user.id)
    return UserResponse(
        id=user.id,
        first_name=user.first_name,
        last_name=user.last_name,
        email=user.email,
        phone=user.phone,
        role=user.role,
        address=AddressDTO.model_validate(address) if address else None,
    )


def _resolve_create_id(session: Session, requested: Optional[str]) -> Optional[str]:
    policy = settings.USER_ID_ON_CREATE
    if requested is None or policy == 'ignore':
        return None
    if policy == 'reject':
        raise InvalidUserRequestError('id must not be supplied when creating a user')
    if get_user(session, requested):
        raise UserConflictError(f'User {requested} already exists')
    return requested


def _store_address(session: Session, user_id: str, payload: Optional[AddressDTO]) -> None:
    record = get_address(session, user_id)
    if payload is None:
        if record:
            session.delete(record)
        return
    if not record:
        record = Address(user_id=user_id)
    # whole-value replace: fields missing from the payload are cleared
    for field in _ADDRESS_FIELDS:
        setattr(record, field, getattr(payload, field))
    session.add(record)


def create_user(session: Session, payload: UserRequest) -> User:
    user_id = _resolve_create_id(session, payload.id)
    user = User(
        first_name=payload.first_name,
        last_name=payload.last_name,
        email=payload.email,
        phone=payload.phone,
        role=payload.role or UserRole.CUSTOMER,
    )
    if user_id is not None:
        user.id = user_id
    session.add(user)
    try:
        # flush so the address row's foreign key has a parent
        session.flush()
        if payload.address is not None:
            _store_address(session, user.id, payload.address)
        session.commit()
    except IntegrityError as exc:
        # lost a race with another create using the same id
        session.rollback()
        raise UserConflictError(f'User {user_id} already exists') from exc
    session.refresh(user)
    logger.info('user.created', user_id=user.id, role=user.role.value)
    return user


def update_user(session: Session, user: User, payload: UserRequest) -> User:
    if payload.id is not None and payload.id != user.id:
        raise InvalidUserRequestError('id in body does not match the user being updated')

    changed = payload.model_fields_set
    for field in _SCALAR_FIELDS:
        if field in changed:
            setattr(user, field, getattr(payload, field))
    if 'role' in changed:
        # explicit null falls back to the default role
        user.role = payload.role or UserRole.CUSTOMER
    if 'address' in changed:
        _store_address(session, user.id, payload.address)
    if changed - {'id'}:
        # an address-only update writes no users column, so onupdate never fires
        user.updated_at = utc_now()

    session.add(user)
    session.commit()
    session.refresh(user)
    logger.info('user.updated', user_id=user.id, fields=sorted(changed - {'id'}))
    return user
