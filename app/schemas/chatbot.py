from pydantic import BaseModel, constr
from typing import Optional
from datetime import datetime
from enum import Enum

class TipoDocumentoEnum(str, Enum):
    documento = "documento"
    personalizado = "personalizado"

class ChatbotCreate(BaseModel):
    name: constr(min_length=1)
    persona: constr(min_length=1)
    tarefa: constr(min_length=1)
    instrucoes: constr(min_length=1)
    saida: constr(min_length=1)
    mensagem_inicial: Optional[str] = None
    tipo_documento: Optional[TipoDocumentoEnum] = TipoDocumentoEnum.personalizado
    icon: Optional[str] = None

    class Config:
        from_attributes = True

class ChatbotUpdate(BaseModel):
    name: Optional[constr(min_length=1)] = None
    persona: Optional[constr(min_length=1)] = None
    tarefa: Optional[constr(min_length=1)] = None
    instrucoes: Optional[constr(min_length=1)] = None
    saida: Optional[constr(min_length=1)] = None
    mensagem_inicial: Optional[str] = None
    tipo_documento: Optional[TipoDocumentoEnum] = None
    icon: Optional[str] = None

    class Config:
        from_attributes = True

class ChatbotRead(BaseModel):
    id: str
    name: str
    persona: str
    tarefa: str
    instrucoes: str
    saida: str
    mensagem_inicial: Optional[str] = None
    tipo_documento: TipoDocumentoEnum
    icon: Optional[str] = None
    status: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
