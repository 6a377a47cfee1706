"""Provision an admin account directly against the database.

    ADMIN_USERNAME=ops ADMIN_PASSWORD=... python -m complaintdesk.scripts.create_admin
"""

import asyncio
import os

from complaintdesk.core.db import AsyncSessionLocal, init_models
from complaintdesk.core.security import hash_password
from complaintdesk.models.enums.user_role import UserRole
from complaintdesk.repositories.user_repository import UserRepository


async def create_admin():
    await init_models()

    async with AsyncSessionLocal() as session:
        admin = await UserRepository(session).create(
            {
                "username": os.getenv("ADMIN_USERNAME", "admin"),
                "password_hash": hash_password(os.getenv("ADMIN_PASSWORD", "admin123")),
                "name": os.getenv("ADMIN_NAME", "Administrator"),
                "email": os.getenv("ADMIN_EMAIL", "admin@complaintdesk.io"),
                "role": UserRole.ADMIN,
            }
        )
        print(f"Admin user created: {admin.username} ({admin.id})")


if __name__ == "__main__":
    asyncio.run(create_admin())
