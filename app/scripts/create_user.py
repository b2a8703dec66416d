"""
Create a user with an explicit role (e.g. the first admin). Run from project root:
  python -m app.scripts.create_user USERNAME EMAIL PASSWORD [role]
Example:
  python -m app.scripts.create_user admin admin@example.com your-secure-password admin
"""
import argparse
import logging
import sys

from app.core.config import get_settings
from app.core.database import SessionLocal
from app.core.logging_config import setup_logging
from app.models.user import ADMIN_ROLE, DEFAULT_ROLE
from app.services.auth import register_user
from app.services.errors import AlreadyExistsError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Create an NFT listing user; the only way to grant the admin role."
    )
    parser.add_argument("username", help="Display name")
    parser.add_argument("email", help="Login email (must be unused)")
    parser.add_argument("password", help="Password")
    parser.add_argument(
        "role", nargs="?", default=DEFAULT_ROLE, choices=[DEFAULT_ROLE, ADMIN_ROLE]
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(get_settings().LOG_LEVEL)

    username = args.username.strip()
    email = args.email.strip()
    if not username or not email or not args.password:
        print("Username, email and password must be non-empty.", file=sys.stderr)
        return 1

    db = SessionLocal()
    try:
        register_user(db, username, email, args.password, role=args.role)
    except AlreadyExistsError:
        print(f"User with email '{email}' already exists.", file=sys.stderr)
        return 1
    except Exception as e:
        logger.exception("Creating user failed: %s", e)
        return 1
    finally:
        db.close()
    print(f"Created user '{username}' <{email}> with role '{args.role}'.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
