# app/schemas/__init__.py

# Schemas de usuário
from .user import UserRead, UserCreate, UserUpdate, UserLogin, LoginResponse

# Schemas de chatbot
from .chatbot import ChatbotRead, ChatbotCreate, ChatbotUpdate

# Schemas de conversa e mensagem
from .conversation import ConversationRead, ConversationCreate, MessageCreate, StoredMessage, MessageResponse

# Schemas de anexos
from .attachment import Attachment, ExtractedContent, TextPart, ImagePart
