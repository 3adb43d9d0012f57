from fastapi import APIRouter

from api.api_v1.endpoints import partners

api_router = APIRouter()

api_router.include_router(
    partners.router, prefix="/partners"
)
api_router.redirect_slashes = False
