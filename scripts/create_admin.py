"""
Script to create the first admin user.

Admin accounts can otherwise only be created by another admin, so run
this once after deploying:
    python -m scripts.create_admin alice --email alice@example.com
"""

import argparse
import asyncio
import getpass
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from ourimpact.core.exceptions import BadRequestError
from ourimpact.crud.user import user as crud_user
from ourimpact.database import async_session, engine
from ourimpact.schemas.user import UserCreate
from ourimpact.utils.security import create_access_token


async def create_admin(user_in: UserCreate) -> str:
    """Create the admin and return a token for it."""
    try:
        async with async_session() as db:
            db_user = await crud_user.register_admin(db, obj_in=user_in)
            return create_access_token(db_user.username, db_user.is_admin)
    finally:
        await engine.dispose()


def main():
    parser = argparse.ArgumentParser(description="Create an admin user")
    parser.add_argument("username")
    parser.add_argument("--email", required=True)
    parser.add_argument("--first-name", default="Admin")
    parser.add_argument("--last-name", default="User")
    parser.add_argument("--city", default=None, help="Home city (must be seeded)")
    args = parser.parse_args()

    password = getpass.getpass("Password: ")

    user_in = UserCreate(
        username=args.username,
        password=password,
        first_name=args.first_name,
        last_name=args.last_name,
        email=args.email,
        user_city=args.city,
    )

    try:
        token = asyncio.run(create_admin(user_in))
    except BadRequestError as exc:
        print(f"Could not create admin: {exc.message}")
        sys.exit(1)

    print("=" * 60)
    print(f"Admin '{args.username}' created.")
    print(f"\nToken:\n\n    {token}\n")
    print("=" * 60)


if __name__ == "__main__":
    main()
