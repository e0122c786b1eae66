from pydantic import BaseModel, EmailStr, validator
from typing import Optional
from datetime import datetime

from app.enums.user_role import UserRole


class UserBase(BaseModel):
    username: str
    email: EmailStr
    first_name: str
    last_name: str
    phone: str
    role: UserRole = UserRole.PLAYER


class UserCreate(UserBase):
    password: str

    @validator("username")
    def validate_username(cls, v):
        if not v or len(v.strip()) < 3:
            raise ValueError("Username must be at least 3 characters long")
        return v.strip()

    @validator("password")
    def validate_password(cls, v):
        if len(v) < 6:
            raise ValueError("Password must be at least 6 characters long")
        return v


class UserInDB(UserBase):
    id: int
    created_at: datetime

    class Config:
        from_attributes = True


class UserResponse(UserInDB):
    pass


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
