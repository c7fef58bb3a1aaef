from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from app import schemas
from app.controllers import conversation as conversation_controller
from app.core.database import get_db
from app.core.security import get_current_user
from app.models.user import User

router = APIRouter(
    prefix="/api/conversations",
    tags=["conversations"]
)

# 🚀 Rota para criar uma nova conversa (o usuário autenticado é o dono padrão)
@router.post("", response_model=schemas.ConversationRead, status_code=status.HTTP_201_CREATED)
def create_conversation(
    conversation_create: schemas.ConversationCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    if not conversation_create.user_id:
        conversation_create.user_id = current_user.id
    return conversation_controller.create_conversation(conversation_create, db)

# 📃 Rota para listar conversas de um chatbot
@router.get("/chatbot/{chatbot_id}", response_model=List[schemas.ConversationRead])
def get_conversations_by_chatbot(chatbot_id: str, db: Session = Depends(get_db)):
    return conversation_controller.get_conversations_by_chatbot(chatbot_id, db)

# 📃 Rota para listar conversas de um usuário
@router.get("/user/{user_id}", response_model=List[schemas.ConversationRead])
def get_conversations_by_user(user_id: str, db: Session = Depends(get_db)):
    return conversation_controller.get_conversations_by_user(user_id, db)

# 🔍 Rota para obter uma conversa pelo ID
@router.get("/{conversation_id}", response_model=schemas.ConversationRead)
def get_conversation(conversation_id: str, db: Session = Depends(get_db)):
    return conversation_controller.read_conversation(conversation_id, db)
