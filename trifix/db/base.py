# File: trifix/db/base.py
# Project: trifix-backend

from sqlalchemy.orm import DeclarativeBase

class Base(DeclarativeBase):
    pass
