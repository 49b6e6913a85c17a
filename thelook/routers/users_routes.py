# thelook/routers/users_routes.py

import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlmodel import Session, select

from thelook.db import get_session
from thelook.deps import ADMIN_ROLE, verify_admin
from thelook.models import User
from thelook.schemas import AdminStatus, InsertResult, UpdateResult, UserCreate, UserPublic

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["users"],
)


@router.post("/users", response_model=InsertResult, response_model_exclude_none=True)
def create_user(
    user: UserCreate,
    session: Session = Depends(get_session),
):
    # 1) Check if email already exists
    existing = session.exec(
        select(User).where(User.email == user.email)
    ).first()
    if existing is not None:
        logger.info("User %s already exists", user.email)
        return InsertResult(acknowledged=False)

    # 2) Create user in DB
    db_user = User(email=user.email, name=user.name)
    session.add(db_user)
    session.commit()
    session.refresh(db_user)  # fills db_user.id

    logger.info("Created user %s", db_user.email)
    return InsertResult(inserted_id=db_user.id)


@router.get(
    "/users",
    response_model=List[UserPublic],
    dependencies=[Depends(verify_admin)],
)
def list_users(session: Session = Depends(get_session)):
    return session.exec(select(User).order_by(User.id)).all()


@router.get("/user/admin/{email}", response_model=AdminStatus)
def is_admin(
    email: str,
    session: Session = Depends(get_session),
):
    user = session.exec(select(User).where(User.email == email)).first()
    return AdminStatus(is_admin=user is not None and user.role == ADMIN_ROLE)


@router.put(
    "/user/admin/{user_id}",
    response_model=UpdateResult,
    response_model_exclude_none=True,
    dependencies=[Depends(verify_admin)],
)
def promote_to_admin(
    user_id: int,
    session: Session = Depends(get_session),
):
    user = session.get(User, user_id)
    if user is None:
        return UpdateResult(matched_count=0, modified_count=0)

    modified = 0
    if user.role != ADMIN_ROLE:
        user.role = ADMIN_ROLE
        session.add(user)
        session.commit()
        modified = 1
        logger.info("Promoted user %s (%s) to admin", user.id, user.email)

    return UpdateResult(matched_count=1, modified_count=modified)
