"""SQLAlchemy ORM models."""

from app.models.base import Base
from app.models.nft import NFT
from app.models.user import User

__all__ = ["Base", "NFT", "User"]
