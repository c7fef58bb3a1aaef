# FILE: tests/conftest.py
"""
Configuração do pytest.

- Banco SQLite em memória compartilhado (StaticPool)
- LLM falso no lugar do ChatOpenAI via dependency_overrides
"""
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["ADMIN_EMAIL"] = ""
os.environ["ADMIN_PASSWORD"] = ""

import pytest
from fastapi.testclient import TestClient
from langchain_core.messages import AIMessage

from app.core.database import Base, SessionLocal, engine
from app.main import app
from app.AI.shared.models.chat_open_ai import get_chat_model
from app.models.chatbot import Chatbot
from app.models.conversation import Conversation


class FakeLLM:
    """Substitui o ChatOpenAI: registra os prompts e devolve uma resposta fixa."""

    def __init__(self, reply="Documento gerado.", error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    def invoke(self, messages, **_kwargs):
        self.calls.append(list(messages))
        if self.error is not None:
            raise self.error
        return AIMessage(content=self.reply)

    @property
    def last_prompt(self):
        return self.calls[-1]


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def fake_llm():
    return FakeLLM()


@pytest.fixture
def client(db, fake_llm):
    app.dependency_overrides[get_chat_model] = lambda: fake_llm
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def chatbot(db):
    bot = Chatbot(
        name="Redator",
        persona="Assistente de redação oficial",
        tarefa="Redigir ofícios",
        instrucoes="Use linguagem formal",
        saida="Ofício completo",
        tipo_documento="documento",
    )
    db.add(bot)
    db.commit()
    db.refresh(bot)
    return bot


@pytest.fixture
def conversation(db, chatbot):
    conv = Conversation(chatbot_id=chatbot.id, title="Nova conversa", messages=[])
    db.add(conv)
    db.commit()
    db.refresh(conv)
    return conv


@pytest.fixture
def auth_headers(client):
    client.post("/api/auth/register", json={
        "email": "ana@example.com",
        "password": "segredo123",
        "name": "Ana",
    })
    response = client.post("/api/auth/login", json={
        "email": "ana@example.com",
        "password": "segredo123",
    })
    token = response.json()["token"]
    return {"Authorization": f"Bearer {token}"}
