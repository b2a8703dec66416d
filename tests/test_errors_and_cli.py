"""Tests for the error-to-status mapping and the create_user operator script."""

import unittest
from unittest.mock import patch

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.api.errors import status_for
from app.models import Base, User
from app.scripts import create_user
from app.services.errors import (
    AlreadyExistsError,
    AuthenticationError,
    AuthorizationError,
    InternalError,
    NotFoundError,
    ServiceError,
    ValidationError,
)


class TestStatusFor(unittest.TestCase):
    def test_mapping(self) -> None:
        self.assertEqual(status_for(ValidationError("x")), 400)
        self.assertEqual(status_for(AlreadyExistsError("x")), 400)
        self.assertEqual(status_for(AuthenticationError("x")), 401)
        self.assertEqual(status_for(AuthorizationError("x")), 403)
        self.assertEqual(status_for(NotFoundError("x")), 404)
        self.assertEqual(status_for(InternalError("x")), 500)
        self.assertEqual(status_for(ServiceError("x")), 500)


class TestCreateUserScript(unittest.TestCase):
    """app.scripts.create_user.main against an in-memory database."""

    def setUp(self) -> None:
        engine = create_engine("sqlite://", poolclass=StaticPool)
        Base.metadata.create_all(engine)
        self.SessionTesting = sessionmaker(bind=engine)
        patcher = patch.object(create_user, "SessionLocal", self.SessionTesting)
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_creates_admin(self) -> None:
        rc = create_user.main(["root", "root@x.com", "pw", "admin"])
        self.assertEqual(rc, 0)
        db = self.SessionTesting()
        try:
            user = db.query(User).filter(User.email == "root@x.com").one()
            self.assertTrue(user.is_admin)
        finally:
            db.close()

    def test_duplicate_email_fails(self) -> None:
        self.assertEqual(create_user.main(["a", "a@x.com", "pw"]), 0)
        self.assertEqual(create_user.main(["b", "a@x.com", "pw"]), 1)

    def test_blank_username_fails(self) -> None:
        self.assertEqual(create_user.main(["  ", "a@x.com", "pw"]), 1)
