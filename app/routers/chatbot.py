from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from typing import List

from app import schemas
from app.controllers import chatbot as chatbot_controller
from app.core.database import get_db
from app.core.security import get_current_user

router = APIRouter(
    prefix="/api/chatbots",
    tags=["chatbots"]
)

# 📃 Rota para listar todos os chatbots
@router.get("", response_model=List[schemas.ChatbotRead])
def list_chatbots(db: Session = Depends(get_db)):
    return chatbot_controller.list_chatbots(db)

# 🔍 Rota para obter um chatbot pelo ID
@router.get("/{chatbot_id}", response_model=schemas.ChatbotRead)
def get_chatbot(chatbot_id: str, db: Session = Depends(get_db)):
    return chatbot_controller.get_chatbot(chatbot_id, db)

# 🚀 Rota para criar um novo chatbot
@router.post(
    "",
    response_model=schemas.ChatbotRead,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(get_current_user)],
)
def create_chatbot(chatbot_create: schemas.ChatbotCreate, db: Session = Depends(get_db)):
    return chatbot_controller.create_chatbot(chatbot_create, db)

# 🔄 Rota para atualizar um chatbot pelo ID
@router.put(
    "/{chatbot_id}",
    response_model=schemas.ChatbotRead,
    dependencies=[Depends(get_current_user)],
)
def update_chatbot(chatbot_id: str, chatbot_update: schemas.ChatbotUpdate, db: Session = Depends(get_db)):
    return chatbot_controller.update_chatbot(chatbot_id, chatbot_update, db)

# 🗑️ Rota para deletar um chatbot pelo ID
@router.delete(
    "/{chatbot_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(get_current_user)],
)
def delete_chatbot(chatbot_id: str, db: Session = Depends(get_db)):
    chatbot_controller.delete_chatbot(chatbot_id, db)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
