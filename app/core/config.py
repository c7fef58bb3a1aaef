import os
from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="allow"
    )

    DEBUG: bool = os.getenv("DEBUG", "False").lower() == "true"
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")

    # URL do banco de dados como string, para o create_engine() não falhar
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./chatbots.db")

    # Conta de administrador criada na inicialização (opcional)
    ADMIN_EMAIL: str = os.getenv("ADMIN_EMAIL", "")
    ADMIN_PASSWORD: str = os.getenv("ADMIN_PASSWORD", "")
    ADMIN_NAME: str = os.getenv("ADMIN_NAME", "Administrador")

    # JWT
    SECRET_KEY: str = os.getenv("SECRET_KEY", "dev-secret-key-change-in-production")
    ALGORITHM: str = os.getenv("ALGORITHM", "HS256")
    ACCESS_TOKEN_EXPIRE_HOURS: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_HOURS", "24"))

    # Agora é um 'str'; se quiser usar como lista, faça .split(",") no código
    FRONT_END: str = os.getenv("FRONT_END", "")

    # OpenAI
    OPENAI_API_KEY: str = os.getenv("OPENAI_API_KEY", "")
    OPENAI_MODEL: str = os.getenv("OPENAI_MODEL", "gpt-4o-mini")
    CHAT_TEMPERATURE: float = 0.3
    CHAT_MAX_TOKENS: int = 3000

    # Extração de texto de PDFs (poppler-utils)
    PDFTOTEXT_PATH: str = os.getenv("PDFTOTEXT_PATH", "pdftotext")
    TEMP_DIR: str = os.getenv("TEMP_DIR", "")

    # Limites de upload do chat
    MAX_UPLOAD_SIZE: int = 10 * 1024 * 1024
    MAX_CHAT_FILES: int = 3

settings = Settings()
