# File: trifix/main.py
# Project: trifix-backend

import os
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from trifix.core.config import cors_origins_list, settings
from trifix.core.logging import setup_logging
from trifix.db.base import Base
from trifix.db.session import engine
from trifix.routers import auth, profile, publications, lookups
from trifix.services.storage import PUBLIC_PREFIX

setup_logging(settings.log_level)
logger = logging.getLogger("trifix")

@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.create_schema:
        Base.metadata.create_all(bind=engine)
    logger.info("Serving uploads from %s", os.path.abspath(settings.upload_dir))
    yield

app = FastAPI(title="Trifix API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins_list(),
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.get("/health")
def health():
    return {"ok": True}

app.include_router(auth.router)
app.include_router(profile.router)
app.include_router(publications.router)
app.include_router(lookups.router)

os.makedirs(settings.upload_dir, exist_ok=True)
app.mount(f"/{PUBLIC_PREFIX}", StaticFiles(directory=settings.upload_dir), name="uploads")

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port)
