import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api import api_router
from .core.config import get_settings

logger = logging.getLogger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(_: FastAPI):
    if not settings.storage_hosts:
        logger.warning("No storage hosts configured; attachment links will not resolve.")
    yield


app = FastAPI(title="attachview API", docs_url="/api/docs", lifespan=lifespan)
app.include_router(api_router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.frontend_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
async def read_root() -> dict:
    return {"status": "ok", "service": "attachview"}


@app.get("/health")
async def health_check() -> dict:
    return {"healthy": True}
