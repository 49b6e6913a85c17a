# thelook/deps.py

import logging
from typing import Optional

from fastapi import Depends, HTTPException, status
from sqlmodel import Session, select

from .auth import verify_token
from .db import get_session
from .models import User

logger = logging.getLogger(__name__)

ADMIN_ROLE = "admin"


def require_role(user: Optional[User], role: str):
    if user is None or user.role != role:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="forbidden access")


# Looked up on every request, never cached
def verify_admin(
    email: str = Depends(verify_token),
    session: Session = Depends(get_session),
) -> User:
    user = session.exec(select(User).where(User.email == email)).first()
    try:
        require_role(user, ADMIN_ROLE)
    except HTTPException:
        logger.warning("Rejected admin request from %s", email)
        raise
    return user
