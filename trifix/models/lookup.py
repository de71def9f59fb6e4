# File: trifix/models/lookup.py
# Project: trifix-backend

# Static reference data; rows are loaded outside the API.
from sqlalchemy import String, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column
from trifix.db.base import Base

class Region(Base):
    __tablename__ = "regions"
    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(120), index=True)

class Municipality(Base):
    __tablename__ = "municipalities"
    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    region_id: Mapped[int | None] = mapped_column(ForeignKey("regions.id"), index=True, nullable=True)
    name: Mapped[str] = mapped_column(String(120), index=True)

class Neighborhood(Base):
    __tablename__ = "neighborhoods"
    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    municipality_id: Mapped[int | None] = mapped_column(ForeignKey("municipalities.id"), index=True, nullable=True)
    name: Mapped[str] = mapped_column(String(120), index=True)
