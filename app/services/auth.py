"""Registration and credential checks for users."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.security import create_access_token, hash_password, verify_password
from app.models.user import DEFAULT_ROLE, User
from app.services.errors import AlreadyExistsError, AuthenticationError

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Invalid email or password"


def register_user(
    db: Session,
    username: str,
    email: str,
    password: str,
    role: str = DEFAULT_ROLE,
) -> User:
    """
    Create a user with a bcrypt-hashed password.

    Raises AlreadyExistsError when the email is taken, either by the lookup
    before insert or by the unique index when two registrations race.
    """
    existing = db.query(User).filter(User.email == email).first()
    if existing is not None:
        raise AlreadyExistsError("User already exists")

    user = User(
        username=username,
        email=email,
        password_hash=hash_password(password),
        role=role,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise AlreadyExistsError("User already exists") from e
    db.refresh(user)
    logger.info("Registered user id=%s role=%s", user.id, user.role)
    return user


def authenticate_user(db: Session, email: str, password: str) -> User:
    """Return the user for email/password or raise AuthenticationError."""
    user = db.query(User).filter(User.email == email).first()
    if user is None or not verify_password(password, user.password_hash):
        logger.info("Rejected login attempt")
        raise AuthenticationError(INVALID_CREDENTIALS_MESSAGE)
    return user


def login(db: Session, email: str, password: str) -> str:
    """Authenticate and issue a bearer token for the user's id."""
    user = authenticate_user(db, email, password)
    logger.info("User id=%s logged in", user.id)
    return create_access_token(sub=user.id)
