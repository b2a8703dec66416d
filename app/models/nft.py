"""ORM model for listed NFTs."""

from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, String, Text, func

from app.models.base import Base


class NFT(Base):
    """
    A listed NFT with its uploaded picture.

    creator_id is taken from the authenticated caller at creation and never reassigned.
    """

    __tablename__ = "nfts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    item_title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    price = Column(Float, nullable=False)
    royalties = Column(Float, nullable=False)
    picture = Column(String(1024), nullable=False)
    creator_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
