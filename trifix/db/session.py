# File: trifix/db/session.py
# Project: trifix-backend

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from trifix.core.config import settings

def _engine_options(url: str) -> dict:
    if url.startswith("sqlite"):
        # requests are served from a threadpool
        return {"connect_args": {"check_same_thread": False}}
    return {
        "pool_pre_ping": True,
        "pool_size": 5,
        "max_overflow": 10,
        "pool_recycle": 3600,
        "pool_timeout": 30,
    }

engine = create_engine(settings.database_url, **_engine_options(settings.database_url))
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
