from fastapi import APIRouter

from easybizness_mail.api import notifications

api_router = APIRouter()

api_router.include_router(notifications.router, tags=["notifications"])
