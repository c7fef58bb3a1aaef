from typing import Iterable, List, Union
from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage

OPERATIONAL_DIRECTIVE = (
    "IMPORTANTE: SEMPRE comece gerando um documento completo inicial. "
    "Depois pergunte se deseja melhorias. Termine sempre com versão final."
)

def build_system_prompt(chatbot) -> str:
    """Monta o prompt de sistema a partir da configuração do chatbot."""
    return (
        f"PERSONA: {chatbot.persona}\n\n"
        f"TAREFA: {chatbot.tarefa}\n\n"
        f"INSTRUÇÕES: {chatbot.instrucoes}\n\n"
        f"SAÍDA ESPERADA: {chatbot.saida}\n\n"
        f"{OPERATIONAL_DIRECTIVE}"
    )

def format_history(messages: Iterable[dict]) -> List[BaseMessage]:
    formatted_messages = []
    for message in messages:
        if message.get("role") == "assistant":
            formatted_messages.append(AIMessage(content=message.get("content", "")))
        else:
            formatted_messages.append(HumanMessage(content=message.get("content", "")))
    return formatted_messages

def assemble_messages(
    chatbot,
    history: Iterable[dict],
    content: Union[str, List[dict]],
) -> List[BaseMessage]:
    """
    Lista ordenada enviada à API: sistema, histórico completo na ordem
    original e o novo turno do usuário. Não há truncamento do histórico.
    """
    return (
        [SystemMessage(content=build_system_prompt(chatbot))]
        + format_history(history)
        + [HumanMessage(content=content)]
    )
