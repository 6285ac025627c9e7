"""Use case resolving the module permissions of the current user."""

from __future__ import annotations

from sqlalchemy.orm import Session

from barangay.domain.entities import User
from barangay.infrastructure.repositories import StaffRepository

MODULES = (
    "dashboard",
    "residentsRecords",
    "documentsRecords",
    "householdRecords",
    "blotterRecords",
    "financialTracking",
    "barangayOfficials",
    "staff",
    "communicationAnnouncement",
    "projectManagement",
    "socialServices",
    "disasterEmergency",
    "inventoryAssets",
    "activityLogs",
)

DEFAULT_PERMISSIONS = {"dashboard": True}


def get_permissions(session: Session, user: User) -> dict[str, object]:
    """Return the permission map for ``user``.

    Administrators get every module. Staff get their stored
    ``module_permissions``; a plain list of module names is expanded into a
    ``{name: True}`` mapping. Users without a staff record only see the
    dashboard.
    """

    if user.is_admin():
        return {module: True for module in MODULES}

    staff = StaffRepository(session).get_by_user_id(user.id)
    if staff is None or not staff.module_permissions:
        return dict(DEFAULT_PERMISSIONS)

    permissions = staff.module_permissions
    if isinstance(permissions, list):
        return {str(module): True for module in permissions}
    return dict(permissions)
