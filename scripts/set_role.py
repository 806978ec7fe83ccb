#!/usr/bin/env python3
"""Change a user's role.

Accounts created through GitHub login start as subscribers; use this to
grant authoring or admin rights. The user must log in again for the new
role to reach their session.

Usage:
    python scripts/set_role.py USERNAME ROLE
Example:
    python scripts/set_role.py octocat author
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlalchemy import select

from minipress.db import async_session_maker
from minipress.models.user import Role, User

logging.basicConfig(level=logging.INFO, format="%(message)s")
logger = logging.getLogger(__name__)

ASSIGNABLE_ROLES = [role.slug for role in Role if role is not Role.GUEST]


async def set_role(username: str, role: Role) -> bool:
    """Set the role of ``username``. Returns False if there is no such user."""
    async with async_session_maker() as db:
        result = await db.execute(select(User).where(User.username == username))
        user = result.scalar_one_or_none()
        if not user:
            return False

        previous = user.role
        user.role = role
        await db.commit()
        logger.info(f"{username}: {previous.slug} -> {role.slug}")
        return True


def main() -> int:
    parser = argparse.ArgumentParser(description="Change a MiniPress user's role.")
    parser.add_argument("username")
    parser.add_argument("role", choices=ASSIGNABLE_ROLES)
    args = parser.parse_args()

    if not asyncio.run(set_role(args.username, Role.from_slug(args.role))):
        logger.error(f"User '{args.username}' not found.")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
