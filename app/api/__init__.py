"""HTTP routes."""

from fastapi import APIRouter

from app.api import auth, health, nfts, uploads

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(nfts.router, tags=["nfts"])
router.include_router(uploads.router, prefix="/uploads", tags=["uploads"])
