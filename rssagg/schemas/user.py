from pydantic import BaseModel
from datetime import datetime
from uuid import UUID


class UserCreate(BaseModel):
    name: str = ""


class UserResponse(BaseModel):
    id: UUID
    created_at: datetime
    updated_at: datetime
    name: str
    api_key: str

    class Config:
        from_attributes = True
