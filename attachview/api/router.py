from fastapi import APIRouter

from attachview.features.attachments.api.router import router as attachments_router

api_router = APIRouter()
api_router.include_router(attachments_router)
