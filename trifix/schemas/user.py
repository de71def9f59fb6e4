#trifix\schemas\user.py
from typing import Optional
from pydantic import BaseModel, ConfigDict, EmailStr, Field

class ProfileOut(BaseModel):
    id: int
    name: Optional[str] = None
    surname: Optional[str] = None
    email: str
    phone: Optional[str] = None
    location: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)

class ProfileUpdateIn(BaseModel):
    """Every profile field is written as sent; omitted ones are stored as null."""
    name: Optional[str] = None
    surname: Optional[str] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    location: Optional[str] = None
    new_password: Optional[str] = Field(default=None, alias="newPassword", max_length=512)

    model_config = ConfigDict(populate_by_name=True)
