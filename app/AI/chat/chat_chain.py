import logging
from typing import List
from langchain_core.messages import BaseMessage
from app.AI.shared.models.chat_open_ai import get_chat_model

logger = logging.getLogger(__name__)

FALLBACK_RESPONSE = "Desculpe, não foi possível gerar uma resposta."

class ChatbotChain:
    def __init__(self, llm=None):
        self.llm = llm if llm is not None else get_chat_model()

    @staticmethod
    def response_text(response) -> str:
        content = getattr(response, "content", None)
        if isinstance(content, list):
            # Respostas em partes: concatena apenas os trechos de texto
            content = "".join(
                part.get("text", "") if isinstance(part, dict) else str(part)
                for part in content
            )
        return content or ""

    def invoke(self, messages: List[BaseMessage]) -> str:
        """
        Chama o modelo com o prompt montado. Exceções da API são propagadas;
        uma resposta vazia é substituída pela mensagem padrão.
        """
        logger.info(f"🤖 Chamando LLM com {len(messages)} mensagens")
        response = self.llm.invoke(messages)
        text = self.response_text(response)
        if not text.strip():
            logger.warning("⚠️ LLM retornou resposta vazia, usando mensagem padrão")
            return FALLBACK_RESPONSE
        return text
