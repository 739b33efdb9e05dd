from datetime import datetime, timedelta, timezone
from fastapi import HTTPException, Request, Response
from jose import jwt, JWTError
from app.core.config import settings
from app.schemas.user import User


def create_access_token(user: User) -> str:
    expire = datetime.now(timezone.utc) + timedelta(minutes=settings.SESSION_TTL_MINUTES)
    payload = {
        "sub": str(user.id),
        "name": user.full_name,
        "currency": user.default_currency,
        "exp": expire,
    }
    return jwt.encode(payload, settings.SESSION_SECRET, algorithm=settings.SESSION_ALGO)


def decode_token(token: str) -> dict:
    try:
        return jwt.decode(token, settings.SESSION_SECRET, algorithms=[settings.SESSION_ALGO])
    except jwt.ExpiredSignatureError:
        raise HTTPException(401, "Session expired")
    except JWTError:
        raise HTTPException(401, "Invalid session")


def get_token_from_cookie(request: Request) -> str:
    token = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if not token:
        raise HTTPException(status_code=401, detail="Not logged in")
    return token


def set_session_cookie(response: Response, user: User):
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=create_access_token(user),
        max_age=settings.SESSION_TTL_MINUTES * 60,
        httponly=True,
        secure=settings.SESSION_COOKIE_SECURE,
        samesite="lax",
    )


def clear_session_cookie(response: Response):
    response.delete_cookie(key=settings.SESSION_COOKIE_NAME)
