# FILE: tests/test_prompt.py
"""
Testes da montagem do prompt enviado à API de chat.
"""
from types import SimpleNamespace

from langchain_core.messages import AIMessage, HumanMessage, SystemMessage

from app.AI.chat.prompt import assemble_messages, build_system_prompt


def make_chatbot():
    return SimpleNamespace(
        persona="Assistente jurídico",
        tarefa="Redigir pareceres",
        instrucoes="Cite a legislação",
        saida="Parecer em tópicos",
    )


def test_system_prompt_has_fields_in_fixed_order():
    prompt = build_system_prompt(make_chatbot())

    assert prompt.startswith("PERSONA: Assistente jurídico\n\nTAREFA: Redigir pareceres")
    labels = ["PERSONA:", "TAREFA:", "INSTRUÇÕES:", "SAÍDA ESPERADA:", "IMPORTANTE:"]
    positions = [prompt.index(label) for label in labels]
    assert positions == sorted(positions)
    assert "SAÍDA ESPERADA: Parecer em tópicos" in prompt
    assert prompt.endswith("Termine sempre com versão final.")


def test_history_is_kept_in_order_with_roles():
    history = [
        {"id": "1", "role": "user", "content": "primeira", "timestamp": "t1"},
        {"id": "2", "role": "assistant", "content": "resposta", "timestamp": "t2"},
        {"id": "3", "role": "user", "content": "segunda", "timestamp": "t3"},
    ]
    messages = assemble_messages(make_chatbot(), history, "nova pergunta")

    assert [type(m) for m in messages] == [SystemMessage, HumanMessage, AIMessage, HumanMessage, HumanMessage]
    assert [m.content for m in messages[1:]] == ["primeira", "resposta", "segunda", "nova pergunta"]


def test_multipart_content_is_passed_through():
    content = [
        {"type": "text", "text": "Descreva"},
        {"type": "image_url", "image_url": {"url": "data:image/png;base64,AAAA"}},
    ]
    messages = assemble_messages(make_chatbot(), [], content)

    assert len(messages) == 2
    assert messages[-1].content == content


def test_long_history_is_not_truncated():
    history = [{"role": "user", "content": f"msg {i}"} for i in range(200)]
    messages = assemble_messages(make_chatbot(), history, "fim")
    assert len(messages) == 202
