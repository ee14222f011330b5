from fastapi import APIRouter

from authgate.api.routes_auth import router as auth_router
from authgate.api.routes_pages import router as pages_router


api_router = APIRouter()

api_router.include_router(pages_router)
api_router.include_router(auth_router)
