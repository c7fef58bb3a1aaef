import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# 🚀 Importando configurações e banco de dados corretamente
from app.core.config import settings
from app.core.database import Base, engine, get_db
from app.models import chatbot, conversation, user as user_model  # noqa: F401 (registra as tabelas)
from app.routers import auth, chatbot as chatbot_router, conversation as conversation_router, chat, upload, health
from app.controllers import user as user_controller
from app.utils.seed import seed_database

logging.basicConfig(level=logging.DEBUG if settings.DEBUG else logging.INFO)

# 🎯 Inicializa a API
app = FastAPI(
    title="Catálogo de Chatbots",
    description="API para gerenciar chatbots, usuários e conversas com anexos.",
    version="1.0.0"
)

# 🌍 Configuração do CORS
origins = [origin.strip() for origin in settings.FRONT_END.split(",") if origin.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins or ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 🚀 Incluir todas as rotas
app.include_router(auth.router)
app.include_router(chatbot_router.router)
app.include_router(conversation_router.router)
app.include_router(chat.router)
app.include_router(upload.router)
app.include_router(health.router)

# 🎯 Evento de inicialização: tabelas, chatbot padrão e usuário admin
@app.on_event("startup")
def startup_event():
    Base.metadata.create_all(bind=engine)
    db = next(get_db())
    try:
        seed_database(db)
        user_controller.create_admin_user(db)
    finally:
        db.close()  # ✅ Fecha a conexão com o banco corretamente
