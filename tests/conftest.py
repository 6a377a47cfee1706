import os
import tempfile
from pathlib import Path

# settings are read at import time
_TMP_DIR = Path(tempfile.mkdtemp(prefix="complaintdesk-tests-"))
_DB_PATH = _TMP_DIR / "test.db"

os.environ.update(
    {
        "APP_ENV": "development",
        "DB_TYPE": "sqlite",
        "SQLITE_PATH": str(_DB_PATH),
        "JWT_ACCESS_SECRET_KEY": "test-secret",
        "ADMIN_SECRET": "test-admin-secret",
        "BCRYPT_ROUNDS": "4",
    }
)

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine

from main import app
from complaintdesk.core.db import Base, AsyncSessionLocal
from complaintdesk.core.security import hash_password
from complaintdesk.models.enums.user_role import UserRole
from complaintdesk.repositories.user_repository import UserRepository

from helpers import PASSWORD


@pytest.fixture(autouse=True)
def reset_db():
    # plain sync engine: no event loop involved in the reset
    engine = create_engine(f"sqlite:///{_DB_PATH}")
    Base.metadata.drop_all(engine)
    Base.metadata.create_all(engine)
    engine.dispose()
    yield


#scope : function < class < module < package < session
@pytest.fixture(scope="function")
def client():
    return TestClient(app)


@pytest.fixture
async def db():
    async with AsyncSessionLocal() as session:
        yield session


@pytest.fixture
def make_user(db):
    async def _make_user(username, role=UserRole.CUSTOMER, name=None):
        return await UserRepository(db).create(
            {
                "username": username,
                "password_hash": hash_password(PASSWORD),
                "name": name or username.capitalize(),
                "email": f"{username}@mail.com",
                "role": role,
            }
        )
    return _make_user
