from functools import lru_cache
from langchain_openai import ChatOpenAI
from app.core.config import settings
from typing import Optional, Dict, Any

def get_model(
    model_name: str = "gpt-4o-mini",
    temperature: Optional[float] = None,
    model_kwargs: Optional[Dict[str, Any]] = None,
    openai_api_key: Optional[str] = None,
    openai_api_base: Optional[str] = None,
    request_timeout: Optional[float] = None,
    max_retries: Optional[int] = None,
    max_tokens: Optional[int] = None
):
    """Configura e retorna o modelo LLM com os parâmetros opcionais apenas se estiverem definidos."""

    params = {
        "api_key": openai_api_key or settings.OPENAI_API_KEY,
        "model": model_name,
        "temperature": temperature,
        "model_kwargs": model_kwargs or {},
        "base_url": openai_api_base,
        "timeout": request_timeout,
        "max_retries": max_retries,
        "max_tokens": max_tokens
    }

    # Remove os parâmetros que são None
    filtered_params = {k: v for k, v in params.items() if v is not None}
    return ChatOpenAI(**filtered_params)

@lru_cache(maxsize=1)
def get_chat_model():
    """
    Cliente do chat criado uma única vez por processo e injetado nas rotas.
    Sem retentativas: uma falha da API vira erro da requisição.
    """
    return get_model(
        model_name=settings.OPENAI_MODEL,
        temperature=settings.CHAT_TEMPERATURE,
        max_tokens=settings.CHAT_MAX_TOKENS,
        max_retries=0,
    )
