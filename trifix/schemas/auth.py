# File: trifix/schemas/auth.py

from pydantic import BaseModel, EmailStr, Field

class RegisterIn(BaseModel):
    name: str
    surname: str
    email: EmailStr
    phone: str
    location: str
    password: str = Field(min_length=1, max_length=512)

class LoginIn(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1, max_length=512)

class MessageOut(BaseModel):
    message: str

class LoginOut(MessageOut):
    token: str
