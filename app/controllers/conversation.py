import logging
import uuid
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy.orm import Session
from sqlalchemy.sql import func
from fastapi import HTTPException

from app.models.chatbot import Chatbot
from app.models.conversation import Conversation
from app.models.user import User
from app.schemas.conversation import ConversationCreate, ConversationRead, MessageCreate

logger = logging.getLogger(__name__)


class ConversationNotFoundError(Exception):
    def __init__(self, conversation_id: str):
        super().__init__(f"Conversation {conversation_id} not found")
        self.conversation_id = conversation_id


# 🔍 Busca a conversa (ou None), sem levantar HTTPException
def get_conversation(conversation_id: str, db: Session) -> Optional[Conversation]:
    return db.query(Conversation).filter(Conversation.id == conversation_id).first()

# ➕ Anexa uma mensagem ao final da conversa
def append_message(conversation_id: str, message: MessageCreate, db: Session) -> dict:
    """
    Lê a lista atual, acrescenta a nova mensagem (com id e timestamp gerados)
    e grava a lista inteira de volta. A leitura e a escrita não são atômicas:
    duas requisições simultâneas na mesma conversa podem perder uma mensagem.
    """
    conversation = get_conversation(conversation_id, db)
    if not conversation:
        raise ConversationNotFoundError(conversation_id)

    stored = {
        "id": str(uuid.uuid4()),
        "role": message.role.value,
        "content": message.content,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
    # Nova lista para que o SQLAlchemy detecte a alteração na coluna JSON
    conversation.messages = list(conversation.messages or []) + [stored]
    conversation.updated_at = func.current_timestamp()
    db.commit()
    db.refresh(conversation)
    logger.info(f"💬 Mensagem {stored['role']} anexada à conversa {conversation_id}")
    return stored

# 🚀 Função para criar uma nova conversa
def create_conversation(conversation_create: ConversationCreate, db: Session) -> ConversationRead:
    chatbot = db.query(Chatbot).filter(Chatbot.id == conversation_create.chatbot_id).first()
    if not chatbot:
        raise HTTPException(status_code=404, detail="Chatbot not found")
    if conversation_create.user_id:
        user = db.query(User).filter(User.id == conversation_create.user_id).first()
        if not user:
            raise HTTPException(status_code=404, detail="User not found")
    new_conversation = Conversation(
        chatbot_id=conversation_create.chatbot_id,
        user_id=conversation_create.user_id,
        title=conversation_create.title,
        messages=[],
    )
    db.add(new_conversation)
    db.commit()
    db.refresh(new_conversation)
    return ConversationRead.model_validate(new_conversation)

# 🔍 Função para obter uma conversa pelo ID
def read_conversation(conversation_id: str, db: Session) -> ConversationRead:
    conversation = get_conversation(conversation_id, db)
    if not conversation:
        raise HTTPException(status_code=404, detail="Conversation not found")
    return ConversationRead.model_validate(conversation)

# 📃 Função para listar conversas de um chatbot
def get_conversations_by_chatbot(chatbot_id: str, db: Session) -> List[ConversationRead]:
    conversations = (
        db.query(Conversation)
        .filter(Conversation.chatbot_id == chatbot_id)
        .order_by(Conversation.created_at.desc())
        .all()
    )
    return [ConversationRead.model_validate(conversation) for conversation in conversations]

# 📃 Função para listar conversas de um usuário
def get_conversations_by_user(user_id: str, db: Session) -> List[ConversationRead]:
    conversations = (
        db.query(Conversation)
        .filter(Conversation.user_id == user_id)
        .order_by(Conversation.created_at.desc())
        .all()
    )
    return [ConversationRead.model_validate(conversation) for conversation in conversations]
