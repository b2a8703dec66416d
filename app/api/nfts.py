"""NFT catalog endpoints: multipart create/update with picture upload, list, get, delete."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from sqlalchemy.orm import Session

from app.api.auth import get_current_user_id
from app.core.config import Settings, get_settings
from app.core.database import get_db
from app.schemas.nft import NFTRead
from app.services import catalog
from app.services.storage import save_upload

router = APIRouter()


def _store_picture(picture: UploadFile, settings: Settings) -> str:
    return save_upload(
        picture.file,
        picture.filename,
        settings.UPLOAD_DIR,
        settings.MAX_UPLOAD_BYTES,
    )


@router.post("/nfts", response_model=NFTRead, status_code=status.HTTP_201_CREATED)
def create_nft(
    user_id: Annotated[int, Depends(get_current_user_id)],
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
    item_title: Annotated[str, Form(alias="itemTitle")],
    description: Annotated[str, Form()],
    price: Annotated[float, Form(allow_inf_nan=False)],
    royalties: Annotated[float, Form(allow_inf_nan=False)],
    picture: Annotated[UploadFile, File()],
) -> NFTRead:
    """
    List a new NFT. Send `multipart/form-data` with `itemTitle`, `description`,
    `price`, `royalties` and a `picture` file. The caller becomes the creator;
    a `creator` field in the form is ignored.
    """
    filename = _store_picture(picture, settings)
    nft = catalog.create_nft(
        db,
        creator_id=user_id,
        item_title=item_title,
        description=description,
        price=price,
        royalties=royalties,
        picture=filename,
    )
    return NFTRead.from_model(nft)


@router.get("/nfts", response_model=list[NFTRead])
def list_nfts(
    _user_id: Annotated[int, Depends(get_current_user_id)],
    db: Annotated[Session, Depends(get_db)],
) -> list[NFTRead]:
    """List every NFT in the catalog."""
    return [NFTRead.from_model(n) for n in catalog.list_nfts(db)]


@router.get("/my-nfts", response_model=list[NFTRead])
def list_my_nfts(
    user_id: Annotated[int, Depends(get_current_user_id)],
    db: Annotated[Session, Depends(get_db)],
) -> list[NFTRead]:
    """List the NFTs created by the caller."""
    return [NFTRead.from_model(n) for n in catalog.list_nfts_by_creator(db, user_id)]


@router.get("/nfts/{nft_id}", response_model=NFTRead)
def get_nft(
    nft_id: int,
    _user_id: Annotated[int, Depends(get_current_user_id)],
    db: Annotated[Session, Depends(get_db)],
) -> NFTRead:
    """Fetch a single NFT by id."""
    return NFTRead.from_model(catalog.get_nft(db, nft_id))


@router.patch("/nfts/{nft_id}", response_model=NFTRead)
def update_nft(
    nft_id: int,
    user_id: Annotated[int, Depends(get_current_user_id)],
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
    item_title: Annotated[str | None, Form(alias="itemTitle")] = None,
    description: Annotated[str | None, Form()] = None,
    price: Annotated[float | None, Form(allow_inf_nan=False)] = None,
    royalties: Annotated[float | None, Form(allow_inf_nan=False)] = None,
    picture: Annotated[UploadFile | None, File()] = None,
) -> NFTRead:
    """
    Partially update an NFT (creator only). Omitted or empty fields keep their
    current value; a new `picture` replaces the stored reference.
    """
    # Ownership is checked before anything is written to disk.
    catalog.check_can_update(db, user_id, nft_id)
    changes = catalog.NFTChanges(
        item_title=item_title,
        description=description,
        price=price,
        royalties=royalties,
    )
    if picture is not None and picture.filename:
        changes.picture = _store_picture(picture, settings)
    nft = catalog.update_nft(db, user_id, nft_id, changes)
    return NFTRead.from_model(nft)


@router.delete("/nfts/{nft_id}", response_model=NFTRead)
def delete_nft(
    nft_id: int,
    user_id: Annotated[int, Depends(get_current_user_id)],
    db: Annotated[Session, Depends(get_db)],
) -> NFTRead:
    """Delete an NFT (creator or admin). Returns the deleted record."""
    return NFTRead.from_model(catalog.delete_nft(db, user_id, nft_id))
