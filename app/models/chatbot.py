# app/models/chatbot.py
import uuid
from sqlalchemy import Column, String, Text, TIMESTAMP, Enum
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.core.database import Base

class Chatbot(Base):
    __tablename__ = "chatbots"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(Text, nullable=False)
    persona = Column(Text, nullable=False)
    tarefa = Column(Text, nullable=False)
    instrucoes = Column(Text, nullable=False)
    saida = Column(Text, nullable=False)
    mensagem_inicial = Column(Text, nullable=True)
    tipo_documento = Column(
        Enum("documento", "personalizado", name="tipos_documento"),
        default="personalizado",
        nullable=False
    )
    icon = Column(String(100), default="fa-robot")
    status = Column(String(50), default="active")

    created_at = Column(
        TIMESTAMP,
        server_default=func.current_timestamp()
    )

    conversations = relationship("Conversation", back_populates="chatbot")
