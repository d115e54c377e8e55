from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlmodel import Session
from app.db.session import get_session
from app.schemas.user import UserRequest, UserResponse
from app.services.user_service import (
    InvalidUserRequestError,
    UserConflictError,
    UserNotFoundError,
    create_user,
    list_users,
    require_user,
    to_user_response,
    update_user,
)

router = APIRouter(prefix='/users', tags=['users'])


def _load_user(session: Session, user_id: str):
    try:
        return require_user(session, user_id)
    except UserNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail='User not found') from exc


@router.get('', response_model=list[UserResponse])
def list_users_endpoint(
    limit: int = Query(50, ge=1, le=500),
    offset: int = Query(0, ge=0),
    session: Session = Depends(get_session),
) -> list[UserResponse]:
    return [to_user_response(session, user) for user in list_users(session, limit=limit, offset=offset)]


@router.get('/{user_id}', response_model=UserResponse)
def get_user_endpoint(user_id: str, session: Session = Depends(get_session)) -> UserResponse:
    return to_user_response(session, _load_user(session, user_id))


@router.post('', response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user_endpoint(payload: UserRequest, session: Session = Depends(get_session)) -> UserResponse:
    try:
        user = create_user(session, payload)
    except UserConflictError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    except InvalidUserRequestError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return to_user_response(session, user)


@router.put('/{user_id}', response_model=UserResponse)
def update_user_endpoint(
    user_id: str,
    payload: UserRequest,
    session: Session = Depends(get_session),
) -> UserResponse:
    user = _load_user(session, user_id)
    try:
        user = update_user(session, user, payload)
    except InvalidUserRequestError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return to_user_response(session, user)
