import logging
from typing import List, Optional

from fastapi import HTTPException, UploadFile
from pydantic import ValidationError
from sqlalchemy.orm import Session

from app.AI.chat.chat_chain import ChatbotChain
from app.AI.chat.prompt import assemble_messages
from app.controllers.conversation import append_message, get_conversation
from app.core.config import settings
from app.models.chatbot import Chatbot
from app.schemas.attachment import Attachment
from app.schemas.conversation import ConversationRead, MessageCreate
from app.services.attachment_service import AttachmentService

logger = logging.getLogger(__name__)

# Tipos aceitos no upload do chat; os demais são descartados silenciosamente
ALLOWED_MIMETYPES = {
    "image/jpeg", "image/png", "image/gif", "image/webp",
    "text/plain", "application/pdf",
    "application/msword",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
}


async def read_attachments(files: Optional[List[UploadFile]]) -> List[Attachment]:
    """
    Filtra os uploads: descarta tipos fora da lista permitida, mantém apenas
    os primeiros arquivos aceitos e rejeita arquivos acima do limite.
    """
    attachments: List[Attachment] = []
    for file in files or []:
        if len(attachments) >= settings.MAX_CHAT_FILES:
            break
        if not file.filename or file.content_type not in ALLOWED_MIMETYPES:
            logger.info(f"🚫 Arquivo ignorado: {file.filename} ({file.content_type})")
            continue
        data = await file.read()
        if len(data) > settings.MAX_UPLOAD_SIZE:
            raise HTTPException(status_code=413, detail=f"File too large: {file.filename}")
        attachments.append(Attachment(
            filename=file.filename,
            mimetype=file.content_type,
            size=len(data),
            data=data,
        ))
    return attachments


def describe_attachments(message: str, attachments: List[Attachment]) -> str:
    """Texto persistido da mensagem do usuário: original + lista de anexos."""
    if not attachments:
        return message
    descriptions = ", ".join(f"{a.filename} ({a.mimetype})" for a in attachments)
    return f"{message}\n[Arquivos anexados: {descriptions}]"


def process_chat_message(
    conversation_id: str,
    message: Optional[str],
    attachments: List[Attachment],
    db: Session,
    chain: ChatbotChain,
    attachment_service: Optional[AttachmentService] = None,
) -> ConversationRead:
    try:
        MessageCreate(role="user", content=message)
    except ValidationError:
        raise HTTPException(status_code=400, detail="Dados inválidos")

    conversation = get_conversation(conversation_id, db)
    if not conversation:
        raise HTTPException(status_code=404, detail="Conversation not found")

    chatbot = db.query(Chatbot).filter(Chatbot.id == conversation.chatbot_id).first()
    if not chatbot:
        raise HTTPException(status_code=404, detail="Chatbot not found")

    # Histórico como estava antes da nova mensagem do usuário
    history = list(conversation.messages or [])

    try:
        user_message = MessageCreate(role="user", content=describe_attachments(message, attachments))
        append_message(conversation_id, user_message, db)

        service = attachment_service or AttachmentService()
        extracted = service.extract(message, attachments)
        logger.info(
            f"📎 {len(attachments)} anexo(s) processado(s) para a conversa {conversation_id} "
            f"(imagens: {len(extracted.images)})"
        )

        prompt = assemble_messages(chatbot, history, extracted.as_message_content())
        assistant_text = chain.invoke(prompt)

        append_message(conversation_id, MessageCreate(role="assistant", content=assistant_text), db)

        db.expire_all()
        return ConversationRead.model_validate(get_conversation(conversation_id, db))
    except Exception:
        logger.exception(f"❌ Error in chat for conversation {conversation_id}")
        db.rollback()
        raise HTTPException(status_code=500, detail="Failed to process chat message")
