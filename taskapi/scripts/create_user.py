"""
Create a user (e.g. first admin). Run from project root:
  python -m taskapi.scripts.create_user USERNAME EMAIL PASSWORD [role]
Example:
  python -m taskapi.scripts.create_user admin admin@example.com 'Admin123' admin
"""
import argparse
import sys

from pydantic import ValidationError

from taskapi.core.database import SessionLocal, create_tables
from taskapi.core.errors import ConflictError
from taskapi.models import UserRole
from taskapi.schemas.auth import RegisterRequest
from taskapi.services import accounts


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a Task API user from the command line.")
    parser.add_argument("username", help="Username (3-50 letters, digits or underscores)")
    parser.add_argument("email", help="Unique email address")
    parser.add_argument("password", help="Password (6+ chars with upper, lower and digit)")
    parser.add_argument(
        "role", nargs="?", default=UserRole.user.value, choices=[r.value for r in UserRole]
    )
    parser.add_argument(
        "--create-tables",
        action="store_true",
        help="Create missing tables first (when not using alembic)",
    )
    args = parser.parse_args(argv)

    try:
        data = RegisterRequest(
            username=args.username,
            email=args.email,
            password=args.password,
            role=args.role,
        )
    except ValidationError as e:
        for err in e.errors():
            print(f"{'.'.join(map(str, err['loc']))}: {err['msg']}", file=sys.stderr)
        return 1

    if args.create_tables:
        create_tables()

    db = SessionLocal()
    try:
        user, _token = accounts.register(db, data)
    except ConflictError as e:
        print(e.message, file=sys.stderr)
        return 1
    finally:
        db.close()
    print(f"Created user '{user.username}' with role '{user.role.value}'.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
