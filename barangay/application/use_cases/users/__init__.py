"""Use cases for managing users."""

from .authenticate_user import AuthenticationResult, AuthenticationStatus, authenticate_user
from .create_user import create_user, register_resident
from .get_permissions import MODULES, get_permissions
from .record_login import record_login

__all__ = [
    "AuthenticationResult",
    "AuthenticationStatus",
    "MODULES",
    "authenticate_user",
    "create_user",
    "get_permissions",
    "record_login",
    "register_resident",
]
