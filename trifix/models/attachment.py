# File: trifix/models/attachment.py
# Project: trifix-backend

from sqlalchemy import String, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column
from trifix.db.base import Base

class Attachment(Base):
    __tablename__ = "attachments"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    publication_id: Mapped[int] = mapped_column(ForeignKey("publications.id"), index=True)
    file_url: Mapped[str] = mapped_column(String(500), nullable=False)
