from pydantic import BaseModel, field_validator
from typing import Optional
from datetime import datetime

class UserCreate(BaseModel):
    email: str
    password: str
    name: str
    rank: Optional[str] = None
    unit: Optional[str] = None

    @field_validator("email")
    @classmethod
    def validate_email(cls, value):
        if "@" not in value or value.startswith("@") or value.endswith("@"):
            raise ValueError("Email inválido")
        return value.strip().lower()

    @field_validator("password")
    @classmethod
    def validate_password(cls, value):
        if len(value) < 6:
            raise ValueError("Senha deve ter pelo menos 6 caracteres")
        return value

    @field_validator("name")
    @classmethod
    def validate_name(cls, value):
        if len(value.strip()) < 2:
            raise ValueError("Nome deve ter pelo menos 2 caracteres")
        return value.strip()

# Atualização parcial do próprio perfil; o email não pode ser trocado
class UserUpdate(BaseModel):
    password: Optional[str] = None
    name: Optional[str] = None
    rank: Optional[str] = None
    unit: Optional[str] = None

    @field_validator("password")
    @classmethod
    def validate_password(cls, value):
        if value is not None and len(value) < 6:
            raise ValueError("Senha deve ter pelo menos 6 caracteres")
        return value

    @field_validator("name")
    @classmethod
    def validate_name(cls, value):
        if value is not None and len(value.strip()) < 2:
            raise ValueError("Nome deve ter pelo menos 2 caracteres")
        return value

class UserRead(BaseModel):
    id: str
    email: str
    name: str
    rank: Optional[str] = None
    unit: Optional[str] = None
    is_active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True

class UserLogin(BaseModel):
    email: str
    password: str

class LoginResponse(BaseModel):
    user: UserRead
    token: str
    message: str
