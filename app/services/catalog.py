"""NFT catalog: create, list, fetch, update and delete with ownership checks."""

import logging
from dataclasses import dataclass

from sqlalchemy.orm import Session

from app.models.nft import NFT
from app.models.user import User
from app.services.errors import AuthorizationError, NotFoundError

logger = logging.getLogger(__name__)

NFT_NOT_FOUND_MESSAGE = "NFT not found"
PERMISSION_DENIED_MESSAGE = "Permission denied"


@dataclass
class NFTChanges:
    """
    Fields supplied by a partial update.

    Falsy values (None, "", 0) mean "keep the stored value".
    """

    item_title: str | None = None
    description: str | None = None
    price: float | None = None
    royalties: float | None = None
    picture: str | None = None


def create_nft(
    db: Session,
    creator_id: int,
    item_title: str,
    description: str,
    price: float,
    royalties: float,
    picture: str,
) -> NFT:
    """Persist a new NFT owned by creator_id."""
    nft = NFT(
        item_title=item_title,
        description=description,
        price=price,
        royalties=royalties,
        picture=picture,
        creator_id=creator_id,
    )
    db.add(nft)
    db.commit()
    db.refresh(nft)
    logger.info("User id=%s created NFT id=%s", creator_id, nft.id)
    return nft


def list_nfts(db: Session) -> list[NFT]:
    """Return every NFT regardless of creator."""
    return db.query(NFT).order_by(NFT.id).all()


def list_nfts_by_creator(db: Session, creator_id: int) -> list[NFT]:
    """Return the NFTs created by creator_id."""
    return db.query(NFT).filter(NFT.creator_id == creator_id).order_by(NFT.id).all()


def get_nft(db: Session, nft_id: int) -> NFT:
    """Return the NFT or raise NotFoundError."""
    nft = db.get(NFT, nft_id)
    if nft is None:
        raise NotFoundError(NFT_NOT_FOUND_MESSAGE)
    return nft


def _load_caller(db: Session, user_id: int) -> User:
    # Tokens are not tied to a live user; a deleted account may not mutate anything.
    user = db.get(User, user_id)
    if user is None:
        logger.info("Permission denied: user id=%s no longer exists", user_id)
        raise AuthorizationError(PERMISSION_DENIED_MESSAGE)
    return user


def check_can_update(db: Session, user_id: int, nft_id: int) -> NFT:
    """
    Return the NFT if user_id may update it. Only the creator may update; the
    admin role does not override this.
    """
    nft = get_nft(db, nft_id)
    _load_caller(db, user_id)
    if nft.creator_id != user_id:
        logger.info("Permission denied: user id=%s updating NFT id=%s", user_id, nft_id)
        raise AuthorizationError(PERMISSION_DENIED_MESSAGE)
    return nft


def update_nft(db: Session, user_id: int, nft_id: int, changes: NFTChanges) -> NFT:
    """Apply a partial update after the ownership check."""
    nft = check_can_update(db, user_id, nft_id)

    if changes.item_title:
        nft.item_title = changes.item_title
    if changes.description:
        nft.description = changes.description
    if changes.price:
        nft.price = changes.price
    if changes.royalties:
        nft.royalties = changes.royalties
    # The previous picture file stays on disk.
    if changes.picture:
        nft.picture = changes.picture

    db.commit()
    db.refresh(nft)
    logger.info("User id=%s updated NFT id=%s", user_id, nft_id)
    return nft


def delete_nft(db: Session, user_id: int, nft_id: int) -> NFT:
    """
    Delete an NFT. Allowed for the creator or any admin. Returns the deleted
    record; its picture file is left in place.
    """
    nft = get_nft(db, nft_id)
    user = _load_caller(db, user_id)
    if nft.creator_id != user_id and not user.is_admin:
        logger.info("Permission denied: user id=%s deleting NFT id=%s", user_id, nft_id)
        raise AuthorizationError(PERMISSION_DENIED_MESSAGE)

    db.delete(nft)
    db.commit()
    logger.info("User id=%s deleted NFT id=%s", user_id, nft_id)
    return nft
