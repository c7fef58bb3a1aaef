from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.concurrency import run_in_threadpool
from sqlalchemy.orm import Session
from typing import List, Optional

from app import schemas
from app.AI.chat.chat_chain import ChatbotChain
from app.AI.shared.models.chat_open_ai import get_chat_model
from app.controllers import chat as chat_controller
from app.core.database import get_db

router = APIRouter(
    prefix="/api/chat",
    tags=["chat"]
)

# 💬 Rota para enviar uma mensagem (com até 3 arquivos) a uma conversa
@router.post("/{conversation_id}", response_model=schemas.ConversationRead)
async def send_message(
    conversation_id: str,
    message: Optional[str] = Form(None),
    files: Optional[List[UploadFile]] = File(None),
    db: Session = Depends(get_db),
    llm=Depends(get_chat_model),
):
    attachments = await chat_controller.read_attachments(files)
    # LLM, pdftotext e commits são bloqueantes: rodam fora do event loop
    return await run_in_threadpool(
        chat_controller.process_chat_message,
        conversation_id, message, attachments, db, ChatbotChain(llm),
    )
