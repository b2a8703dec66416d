"""ORM model for application users (credentials and role)."""

from sqlalchemy import Column, Integer, String

from app.models.base import Base

ADMIN_ROLE = "admin"
DEFAULT_ROLE = "user"


class User(Base):
    """
    User account for JWT authentication and NFT ownership.

    role: 'admin' or 'user'; a NULL role is treated as 'user'.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), nullable=False)
    email = Column(String(320), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(32), nullable=True, default=DEFAULT_ROLE)

    @property
    def is_admin(self) -> bool:
        return self.role == ADMIN_ROLE
