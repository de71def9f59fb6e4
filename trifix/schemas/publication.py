from pydantic import BaseModel, ConfigDict
from typing import Optional, List
from datetime import datetime


class PublicationCreatedOut(BaseModel):
    message: str
    attachments_saved: int
    attachments_total: int


class PublicationOut(BaseModel):
    id: int
    title: str
    description: Optional[str] = None
    priority: Optional[str] = None
    created_at: Optional[datetime] = None

    # display names from LEFT joins; null when the reference is missing
    author: Optional[str] = None
    region: Optional[str] = None
    municipality: Optional[str] = None
    neighborhood: Optional[str] = None

    attachments: List[str] = []


class LookupOut(BaseModel):
    id: int
    name: str

    model_config = ConfigDict(from_attributes=True)
