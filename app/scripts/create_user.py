"""
Create an account (e.g. the first admin) without going through the API. Run from project root:
  python -m app.scripts.create_user USERNAME EMAIL PASSWORD [role]
Example:
  python -m app.scripts.create_user chief chief@example.com your-secure-password admin
"""
import argparse
import logging
import sys

from app.core import SessionLocal, get_settings
from app.models.user import KNOWN_ROLES, ROLE_USER
from app.services.accounts import register
from app.services.errors import ServiceError

logging.basicConfig(
    level=get_settings().LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main() -> int:
    parser = argparse.ArgumentParser(description="Create a Geodata API account.")
    parser.add_argument("username", help="Display name (1-255 chars)")
    parser.add_argument("email", help="Login email; stored lowercase")
    parser.add_argument("password", help="Password (1-128 chars)")
    parser.add_argument("role", nargs="?", default=ROLE_USER, choices=KNOWN_ROLES)
    args = parser.parse_args()

    username = args.username.strip()
    if not username or len(username) > 255:
        print("Invalid username length.", file=sys.stderr)
        return 1
    if not args.password or len(args.password) > 128:
        print("Password must be 1-128 characters.", file=sys.stderr)
        return 1

    db = SessionLocal()
    try:
        user = register(db, username, args.email, args.password, args.role)
        print(f"Created account '{user.email}' with role '{user.role}'.")
        return 0
    except ServiceError as e:
        # StorageError carries the underlying cause (e.g. duplicate email)
        logger.error("Account creation failed: %s (%s)", e.message, e.cause)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
