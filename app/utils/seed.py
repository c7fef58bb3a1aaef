import logging
from sqlalchemy.orm import Session

from app.core.database import Base, SessionLocal, engine
from app.models.chatbot import Chatbot
from app.models.conversation import Conversation  # noqa: F401 (registra o mapeamento)
from app.models.user import User  # noqa: F401

logger = logging.getLogger(__name__)

DEFAULT_CHATBOT = {
    "name": "SAD VIRTUAL",
    "persona": (
        "Um assistente virtual especializado na elaboração de documentos oficiais e administrativos, "
        "com foco em clareza, objetividade e padronização de estrutura textual. Atua como facilitador "
        "no processo de criação de ofícios, e-mails, relatórios e atas, guiando o usuário com base nas "
        "boas práticas da redação oficial."
    ),
    "tarefa": (
        "Auxiliar o usuário na geração de documentos a partir de um menu de opções, coletando informações "
        "necessárias e estruturando o texto conforme o tipo de documento selecionado, sempre com foco na "
        "clareza, precisão e padronização institucional."
    ),
    "instrucoes": (
        "SEMPRE gere um documento inicial completo com base na solicitação do usuário. Após gerar o "
        "documento, você pode fazer perguntas para aprimorá-lo, mas SEMPRE termine com uma versão final "
        "completa.\n\n"
        "Para OFÍCIO INTERNO:\n"
        "- Início: \"Trata o presente expediente de [assunto].\"\n"
        "- Desenvolvimento: parágrafos com conectivos (Sobre o assunto, Dessa forma, Sendo assim)\n"
        "- Conclusão: \"Sendo essas as considerações, coloco-me à disposição para as coordenações "
        "necessárias.\"\n\n"
        "Para OFÍCIO EXTERNO:\n"
        "- Início: \"Ao cumprimentá-lo cordialmente, passo a tratar sobre [assunto].\"\n"
        "- Desenvolvimento: parágrafos estruturados\n"
        "- Conclusão: \"Aproveito para renovar meus votos de elevada estima e distinta consideração.\"\n\n"
        "FLUXO: 1) Gere documento inicial 2) Pergunte se deseja ajustes 3) Refine conforme necessário "
        "4) Entregue versão final."
    ),
    "saida": "Documento completo inicial + interação para refinamento + versão final perfeita e pronta para uso.",
    "mensagem_inicial": None,
    "tipo_documento": "documento",
    "icon": "fa-file-alt",
    "status": "active",
}

def seed_database(db: Session) -> Chatbot:
    """Cria o chatbot padrão caso ainda não exista. Pode ser executado várias vezes."""
    existing = db.query(Chatbot).filter(Chatbot.name == DEFAULT_CHATBOT["name"]).first()
    if existing:
        logger.info(f"Default chatbot already exists: {existing.name}")
        return existing
    chatbot = Chatbot(**DEFAULT_CHATBOT)
    db.add(chatbot)
    db.commit()
    db.refresh(chatbot)
    logger.info(f"Default chatbot created: {chatbot.name} ✅")
    return chatbot


def main():
    logging.basicConfig(level=logging.INFO)
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        seed_database(db)
    finally:
        db.close()


if __name__ == "__main__":
    main()
