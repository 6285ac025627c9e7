"""Routes describing the authenticated user."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from barangay.application.use_cases.users import get_permissions
from barangay.domain.entities import User
from barangay.infrastructure.database import get_db
from barangay.interfaces.api.dependencies import get_current_active_user
from barangay.interfaces.api.schemas import PermissionsRead

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me/permissions", response_model=PermissionsRead)
def read_current_permissions(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> PermissionsRead:
    """Return the module permissions of the authenticated user."""

    return PermissionsRead(
        role=current_user.role.alias,
        permissions=get_permissions(db, current_user),
    )
