# thelook/routers/auth_routes.py

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session, select

from thelook.auth import create_access_token, get_app_settings
from thelook.config import Settings
from thelook.db import get_session
from thelook.models import User
from thelook.schemas import Token

router = APIRouter(
    tags=["auth"],
)


@router.get("/jwt", response_model=Token)
def issue_token(
    email: str,
    session: Session = Depends(get_session),
    settings: Settings = Depends(get_app_settings),
):
    user = session.exec(
        select(User).where(User.email == email)
    ).first()

    if user is None:
        raise HTTPException(status_code=404, detail="user not found")

    return Token(access_token=create_access_token(user.email, settings))
