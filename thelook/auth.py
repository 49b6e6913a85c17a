# thelook/auth.py

import logging
from datetime import datetime, timedelta, timezone

from fastapi import Depends, HTTPException, Request, status
from jose import jwt, JWTError

from .config import Settings

logger = logging.getLogger(__name__)


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def create_access_token(email: str, settings: Settings) -> str:
    expire = datetime.now(timezone.utc) + timedelta(
        minutes=settings.access_token_expire_minutes
    )
    to_encode = {"email": email, "exp": expire}
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str, settings: Settings) -> str:
    """Return the email claim of `token`, raising JWTError if it is unusable."""
    payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    email = payload.get("email")
    if not email:
        raise JWTError("token has no email claim")
    return email


def verify_token(
    request: Request,
    settings: Settings = Depends(get_app_settings),
) -> str:
    # Only an absent header is unauthorized; anything sent is checked as a token
    auth_header = request.headers.get("Authorization")
    if not auth_header:
        logger.warning("Rejected %s %s: no authorization header", request.method, request.url.path)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="unauthorized",
            headers={"WWW-Authenticate": "Bearer"},
        )

    scheme, _, token = auth_header.strip().partition(" ")
    try:
        if scheme.lower() != "bearer" or not token.strip():
            raise JWTError("not a bearer token")
        email = decode_access_token(token.strip(), settings)
    except JWTError as exc:
        logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc)
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="forbidden access",
        )

    request.state.decoded_email = email
    return email
