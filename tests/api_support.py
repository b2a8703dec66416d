"""Shared TestCase for API tests: in-memory SQLite and a temporary upload directory."""

import tempfile
import unittest
from pathlib import Path

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.config import get_settings
from app.core.database import get_db
from app.main import app
from app.models import Base, User
from app.services.auth import register_user

PICTURE_BYTES = b"\xff\xd8\xff\xe0fake-jpeg-payload"


class ApiTestCase(unittest.TestCase):
    """Runs each test against a fresh database and upload directory."""

    def setUp(self) -> None:
        self.engine = create_engine(
            "sqlite://",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        Base.metadata.create_all(self.engine)
        self.SessionTesting = sessionmaker(
            bind=self.engine, autocommit=False, autoflush=False
        )

        self._tmp = tempfile.TemporaryDirectory()
        self.upload_dir = Path(self._tmp.name)
        self.override_settings()

        def override_get_db():
            db = self.SessionTesting()
            try:
                yield db
            finally:
                db.close()

        app.dependency_overrides[get_db] = override_get_db
        self.client = TestClient(app)

    def tearDown(self) -> None:
        app.dependency_overrides.clear()
        self.engine.dispose()
        self._tmp.cleanup()

    # Helpers

    def override_settings(self, **updates: object) -> None:
        """Serve a copy of the settings with updates to every route for this test."""
        test_settings = get_settings().model_copy(
            update={"UPLOAD_DIR": self.upload_dir, **updates}
        )
        app.dependency_overrides[get_settings] = lambda: test_settings

    def register(self, username: str, email: str, password: str):
        return self.client.post(
            "/auth/register",
            json={"username": username, "email": email, "password": password},
        )

    def login(self, email: str, password: str):
        return self.client.post("/auth/login", json={"email": email, "password": password})

    def user_token(self, username: str, email: str, password: str = "secret1") -> str:
        """Register (via the API) and log in; return the bearer token."""
        self.assertEqual(self.register(username, email, password).status_code, 201)
        resp = self.login(email, password)
        self.assertEqual(resp.status_code, 200)
        return resp.json()["token"]

    def admin_token(self, email: str = "admin@x.com", password: str = "adminpw") -> str:
        db = self.SessionTesting()
        try:
            register_user(db, "admin", email, password, role="admin")
        finally:
            db.close()
        return self.login(email, password).json()["token"]

    def user_id(self, email: str) -> int:
        db = self.SessionTesting()
        try:
            return db.query(User).filter(User.email == email).one().id
        finally:
            db.close()

    @staticmethod
    def auth(token: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {token}"}

    def create_nft(
        self,
        token: str,
        filename: str = "art1.jpg",
        content: bytes = PICTURE_BYTES,
        **fields: object,
    ):
        data = {"itemTitle": "Art1", "description": "d", "price": "10", "royalties": "5"}
        data.update({k: str(v) for k, v in fields.items()})
        return self.client.post(
            "/nfts",
            data=data,
            files={"picture": (filename, content, "image/jpeg")},
            headers=self.auth(token),
        )
