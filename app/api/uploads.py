"""Public image route for stored NFT pictures."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import FileResponse

from app.core.config import Settings, get_settings
from app.services.storage import resolve_upload

router = APIRouter()


@router.get("/{filename}", response_class=FileResponse)
def get_upload(
    filename: str,
    settings: Annotated[Settings, Depends(get_settings)],
) -> FileResponse:
    """
    Stream a stored picture. The content type is always IMAGE_MEDIA_TYPE,
    whatever the file actually contains.
    """
    path = resolve_upload(filename, settings.UPLOAD_DIR)
    if path is None:
        raise HTTPException(status_code=404, detail="Not Found")
    return FileResponse(path, media_type=settings.IMAGE_MEDIA_TYPE)
