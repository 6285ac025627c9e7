"""FastAPI dependency utilities."""

from hashlib import sha256

from fastapi import Depends, HTTPException, Request, Response, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from barangay.domain.entities import User
from barangay.infrastructure.database import get_db
from barangay.infrastructure.repositories import UserRepository
from barangay.infrastructure.security import decode_access_token, refresh_access_token

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/token")


def _credentials_error(detail: str = "Invalid credentials") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def password_signature(user: User) -> str:
    """Return the claim that invalidates tokens when the password or status changes."""

    return sha256(f"{user.password}:{int(user.is_active)}".encode()).hexdigest()


def resolve_current_user(token: str, db: Session) -> User:
    """Resolve the authenticated user for the provided token."""

    try:
        payload = decode_access_token(token)
    except ValueError as exc:
        raise _credentials_error() from exc

    email = payload.get("sub")
    signature_claim = payload.get("pwd_sig")
    if not isinstance(email, str) or not isinstance(signature_claim, str):
        raise _credentials_error()

    user = UserRepository(db).get_by_email(email)
    if user is None:
        raise _credentials_error("User not found")

    if signature_claim != password_signature(user):
        raise _credentials_error()

    return user


def get_current_user(
    request: Request,
    response: Response,
    token: str = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> User:
    """Return the authenticated user and expose a renewed token."""

    user = resolve_current_user(token, db)

    try:
        refreshed_token = refresh_access_token(token)
    except ValueError as exc:
        raise _credentials_error() from exc

    response.headers["X-Refreshed-Token"] = refreshed_token
    request.state.refreshed_token = refreshed_token

    return user


def get_current_active_user(current_user: User = Depends(get_current_user)) -> User:
    """Ensure the authenticated user is active."""

    if not current_user.is_active:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Inactive user",
        )
    return current_user


def require_staff(current_user: User = Depends(get_current_active_user)) -> User:
    """Ensure the authenticated user is a staff member or an administrator."""

    if not current_user.is_staff():
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Unauthorized",
        )
    return current_user


__all__ = [
    "get_current_active_user",
    "get_current_user",
    "oauth2_scheme",
    "password_signature",
    "require_staff",
    "resolve_current_user",
]
