"""Create the first account of a barangay deployment.

Admins and staff get a bare user row. Residents also get the resident profile
the notification feed requires.
"""

from __future__ import annotations

import argparse
from getpass import getpass

from sqlalchemy.exc import SQLAlchemyError

from barangay.application.use_cases.users.create_user import create_user, register_resident
from barangay.domain.entities import ROLE_ADMIN, ROLE_RESIDENT, ROLE_STAFF
from barangay.infrastructure.database import SessionLocal, initialize_database


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create a Barangay API account.")
    parser.add_argument("--name", default="Administrator", help="Display name (default: Administrator)")
    parser.add_argument("--email", default="admin@example.com", help="Login email address")
    parser.add_argument(
        "--role",
        default=ROLE_ADMIN,
        choices=(ROLE_ADMIN, ROLE_STAFF, ROLE_RESIDENT),
        help="Role alias of the account (default: admin)",
    )
    parser.add_argument("--password", help="Account password; prompted when omitted")
    return parser.parse_args()


def _create_account(session, args: argparse.Namespace, password: str):
    if args.role != ROLE_RESIDENT:
        return create_user(
            session,
            name=args.name,
            email=args.email,
            password=password,
            role_alias=args.role,
        )
    first_name, _, last_name = args.name.partition(" ")
    user, _resident = register_resident(
        session,
        first_name=first_name,
        last_name=last_name,
        email=args.email,
        password=password,
    )
    return user


def main() -> None:
    args = parse_args()
    password = args.password or getpass(f"Password for {args.email}: ")
    if not password:
        raise SystemExit("A password is required.")

    initialize_database()
    session = SessionLocal()
    try:
        user = _create_account(session, args, password)
    except ValueError as exc:
        session.rollback()
        raise SystemExit(f"Account rejected: {exc}") from exc
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Database error while creating the account: {exc}") from exc
    finally:
        session.close()

    print(f"Created {args.role} account #{user.id} for {user.email}")


if __name__ == "__main__":
    main()
