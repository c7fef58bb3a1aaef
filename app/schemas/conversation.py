from pydantic import BaseModel, constr
from typing import Optional, List
from datetime import datetime
from enum import Enum

class RoleEnum(str, Enum):
    user = "user"
    assistant = "assistant"

class MessageCreate(BaseModel):
    role: RoleEnum
    content: constr(min_length=1)

class StoredMessage(BaseModel):
    id: str
    role: RoleEnum
    content: str
    timestamp: str

class ConversationCreate(BaseModel):
    chatbot_id: str
    user_id: Optional[str] = None
    title: constr(min_length=1)

    class Config:
        from_attributes = True

class ConversationRead(BaseModel):
    id: str
    chatbot_id: Optional[str] = None
    user_id: Optional[str] = None
    title: str
    messages: List[StoredMessage] = []
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True

class MessageResponse(BaseModel):
    message: str
