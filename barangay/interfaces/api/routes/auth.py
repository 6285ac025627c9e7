"""Endpoints related to authentication."""

import logging
from datetime import timedelta

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session

from barangay.application.use_cases.activity_logs import record_activity
from barangay.application.use_cases.users import (
    AuthenticationStatus,
    authenticate_user,
    record_login,
)
from barangay.config import get_settings
from barangay.infrastructure.database import get_db
from barangay.infrastructure.security import create_access_token
from barangay.interfaces.api.dependencies import password_signature
from barangay.interfaces.api.routes_helpers import client_metadata
from barangay.interfaces.api.schemas import Token

router = APIRouter(prefix="/auth", tags=["auth"])
logger = logging.getLogger(__name__)


# The signature expected by OAuth2PasswordRequestForm is kept.
@router.post("/token", response_model=Token)
def login_for_access_token(
    request: Request,
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: Session = Depends(get_db),
):
    """Authenticate the user by email and return a bearer token."""

    user, auth_status = authenticate_user(db, form_data.username, form_data.password)

    if auth_status is AuthenticationStatus.INVALID_CREDENTIALS:
        logger.info("Rejected login for %s: invalid credentials", form_data.username)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    if auth_status is AuthenticationStatus.INACTIVE:
        logger.info("Rejected login for %s: account inactive", form_data.username)
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Inactive user",
            headers={"WWW-Authenticate": "Bearer"},
        )

    access_token = create_access_token(
        data={
            "sub": user.email,
            "role": user.role.alias,
            "pwd_sig": password_signature(user),
        },
        expires_delta=timedelta(minutes=get_settings().access_token_expire_minutes),
    )
    record_login(db, user.id)
    record_activity(
        db,
        user_id=user.id,
        action="login",
        model_type="User",
        model_id=user.id,
        description=f"{user.name} logged in",
        **client_metadata(request),
    )
    return {
        "access_token": access_token,
        "token_type": "bearer",
        "role": user.role.alias,
    }
