"""
Create an account from the command line, with the same rules as the sign-up form.
Run from project root:
  python -m clubhouse.scripts.create_user FIRST_NAME LAST_NAME USERNAME EMAIL PASSWORD
Example:
  python -m clubhouse.scripts.create_user Jane Doe janedoe jane@example.com 'Secret1!'
"""
import argparse
import logging
import sys

from clubhouse.core.database import SessionLocal
from clubhouse.services.registration import DuplicateAccountError, register_user
from clubhouse.services.user_store import UserStore
from clubhouse.services.validation import validate_sign_up

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a Clubhouse account.")
    parser.add_argument("first_name")
    parser.add_argument("last_name")
    parser.add_argument("username")
    parser.add_argument("email")
    parser.add_argument("password")
    args = parser.parse_args(argv)

    result = validate_sign_up(
        {
            "first_name": args.first_name,
            "last_name": args.last_name,
            "username": args.username,
            "email": args.email,
            "password": args.password,
            "confirm-password": args.password,
        }
    )
    if not result.ok:
        for error in result.errors:
            print(f"{error.param}: {error.msg}", file=sys.stderr)
        return 1

    db = SessionLocal()
    try:
        user = register_user(UserStore(db), result.data)
    except DuplicateAccountError as e:
        print(e.message, file=sys.stderr)
        return 1
    finally:
        db.close()
    print(f"Created user '{user.username}' (id={user.id}).")
    return 0


if __name__ == "__main__":
    sys.exit(main())
