from sqlalchemy.orm import Session
from fastapi import HTTPException
from typing import List

from app.models.chatbot import Chatbot
from app.schemas.chatbot import ChatbotCreate, ChatbotRead, ChatbotUpdate, TipoDocumentoEnum

# 🚀 Função para criar um novo chatbot
def create_chatbot(chatbot_create: ChatbotCreate, db: Session) -> ChatbotRead:
    new_chatbot = Chatbot(
        name=chatbot_create.name,
        persona=chatbot_create.persona,
        tarefa=chatbot_create.tarefa,
        instrucoes=chatbot_create.instrucoes,
        saida=chatbot_create.saida,
        mensagem_inicial=chatbot_create.mensagem_inicial,
        tipo_documento=(chatbot_create.tipo_documento or TipoDocumentoEnum.personalizado).value,
        icon=chatbot_create.icon or "fa-robot",
        status="active",
    )
    db.add(new_chatbot)
    db.commit()
    db.refresh(new_chatbot)
    return ChatbotRead.model_validate(new_chatbot)

# 🔍 Função para obter um chatbot pelo ID
def get_chatbot(chatbot_id: str, db: Session) -> ChatbotRead:
    db_chatbot = db.query(Chatbot).filter(Chatbot.id == chatbot_id).first()
    if not db_chatbot:
        raise HTTPException(status_code=404, detail="Chatbot not found")
    return ChatbotRead.model_validate(db_chatbot)

# 📃 Função para listar todos os chatbots
def list_chatbots(db: Session) -> List[ChatbotRead]:
    chatbots = db.query(Chatbot).order_by(Chatbot.created_at.asc()).all()
    return [ChatbotRead.model_validate(chatbot) for chatbot in chatbots]

# 🔄 Função para atualizar um chatbot pelo ID
def update_chatbot(chatbot_id: str, chatbot_update: ChatbotUpdate, db: Session) -> ChatbotRead:
    db_chatbot = db.query(Chatbot).filter(Chatbot.id == chatbot_id).first()
    if not db_chatbot:
        raise HTTPException(status_code=404, detail="Chatbot not found")
    for field, value in chatbot_update.model_dump(mode="json", exclude_unset=True).items():
        if value is not None:
            setattr(db_chatbot, field, value)
    db.commit()
    db.refresh(db_chatbot)
    return ChatbotRead.model_validate(db_chatbot)

# 🗑️ Função para deletar um chatbot pelo ID
def delete_chatbot(chatbot_id: str, db: Session):
    db_chatbot = db.query(Chatbot).filter(Chatbot.id == chatbot_id).first()
    if not db_chatbot:
        raise HTTPException(status_code=404, detail="Chatbot not found")
    db.delete(db_chatbot)
    db.commit()
