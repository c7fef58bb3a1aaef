# FILE: tests/test_chat_api.py
"""
Testes da rota POST /api/chat/{conversation_id}.
"""
import asyncio
import base64
import subprocess
import time

import httpx
from langchain_core.messages import AIMessage, HumanMessage, SystemMessage

from app.AI.chat.chat_chain import FALLBACK_RESPONSE
from app.AI.shared.models.chat_open_ai import get_chat_model
from app.main import app
from app.services import attachment_service


def get_messages(client, conversation_id):
    response = client.get(f"/api/conversations/{conversation_id}")
    assert response.status_code == 200
    return response.json()["messages"]


class TestChatSuccess:

    def test_text_attachment_reaches_prompt(self, client, conversation, fake_llm):
        response = client.post(
            f"/api/chat/{conversation.id}",
            data={"message": "Resuma este texto"},
            files=[("files", ("hello.txt", b"Hello world", "text/plain"))],
        )

        assert response.status_code == 200
        body = response.json()
        assert [m["role"] for m in body["messages"]] == ["user", "assistant"]
        assert body["messages"][0]["content"] == "Resuma este texto\n[Arquivos anexados: hello.txt (text/plain)]"
        assert body["messages"][1]["content"] == "Documento gerado."

        final_user = fake_llm.last_prompt[-1]
        assert isinstance(final_user, HumanMessage)
        assert "[Conteúdo do arquivo hello.txt]:\nHello world" in final_user.content

    def test_new_messages_are_appended_to_history(self, client, conversation, fake_llm):
        client.post(f"/api/chat/{conversation.id}", data={"message": "primeira"})
        fake_llm.reply = "segunda resposta"
        response = client.post(f"/api/chat/{conversation.id}", data={"message": "segunda"})

        messages = response.json()["messages"]
        assert [m["content"] for m in messages] == [
            "primeira", "Documento gerado.", "segunda", "segunda resposta",
        ]
        # O prompt usa o histórico anterior + o novo turno, sem duplicar a mensagem
        prompt = fake_llm.last_prompt
        assert isinstance(prompt[0], SystemMessage)
        assert [m.content for m in prompt[1:]] == ["primeira", "Documento gerado.", "segunda"]

    def test_system_prompt_uses_chatbot_configuration(self, client, conversation, chatbot, fake_llm):
        client.post(f"/api/chat/{conversation.id}", data={"message": "Olá"})

        system = fake_llm.last_prompt[0].content
        assert f"PERSONA: {chatbot.persona}" in system
        assert f"INSTRUÇÕES: {chatbot.instrucoes}" in system

    def test_png_attachment_produces_multipart_content(self, client, conversation, fake_llm):
        png = b"\x89PNG\r\n\x1a\n" + b"\x00" * (4 * 1024 * 1024)
        response = client.post(
            f"/api/chat/{conversation.id}",
            data={"message": "O que há na imagem?"},
            files=[("files", ("grafico.png", png, "image/png"))],
        )

        assert response.status_code == 200
        content = fake_llm.last_prompt[-1].content
        assert isinstance(content, list)
        assert [part["type"] for part in content] == ["text", "image_url"]
        url = content[1]["image_url"]["url"]
        assert url.startswith("data:image/png;base64,")
        assert base64.b64decode(url.split(",", 1)[1]) == png

    def test_image_with_text_file_keeps_full_annotated_text(self, client, conversation, fake_llm):
        png = b"\x89PNG\r\n\x1a\n" + b"\x00" * 16
        response = client.post(
            f"/api/chat/{conversation.id}",
            data={"message": "Compare"},
            files=[
                ("files", ("foto.png", png, "image/png")),
                ("files", ("notas.txt", b"linha um\nlinha dois", "text/plain")),
            ],
        )

        assert response.status_code == 200
        content = fake_llm.last_prompt[-1].content
        assert [part["type"] for part in content] == ["text", "image_url"]
        text = content[0]["text"]
        assert text.startswith("Compare")
        assert "[Imagem anexada: foto.png]" in text
        assert "[Conteúdo do arquivo notas.txt]:\nlinha um\nlinha dois" in text
        assert content[1]["image_url"]["url"].startswith("data:image/png;base64,")

    def test_pdf_attachment_is_extracted(self, client, conversation, fake_llm, monkeypatch):
        def fake_run(args, **kwargs):
            return subprocess.CompletedProcess(args, 0, stdout=b"Texto do contrato assinado", stderr=b"")

        monkeypatch.setattr(attachment_service.subprocess, "run", fake_run)
        response = client.post(
            f"/api/chat/{conversation.id}",
            data={"message": "Analise"},
            files=[("files", ("contrato.pdf", b"%PDF-1.7", "application/pdf"))],
        )

        assert response.status_code == 200
        assert "[Conteúdo extraído do PDF contrato.pdf]:\nTexto do contrato assinado" in fake_llm.last_prompt[-1].content

    def test_disallowed_files_are_dropped_silently(self, client, conversation, fake_llm):
        response = client.post(
            f"/api/chat/{conversation.id}",
            data={"message": "Veja"},
            files=[("files", ("script.sh", b"echo hi", "application/x-sh"))],
        )

        assert response.status_code == 200
        assert response.json()["messages"][0]["content"] == "Veja"
        assert fake_llm.last_prompt[-1].content == "Veja"

    def test_only_first_three_files_are_used(self, client, conversation, fake_llm):
        files = [("files", (f"f{i}.txt", f"conteudo {i}".encode(), "text/plain")) for i in range(4)]
        client.post(f"/api/chat/{conversation.id}", data={"message": "Leia"}, files=files)

        content = fake_llm.last_prompt[-1].content
        assert "conteudo 2" in content
        assert "conteudo 3" not in content

    def test_empty_llm_reply_uses_fallback(self, client, conversation, fake_llm):
        fake_llm.reply = ""
        response = client.post(f"/api/chat/{conversation.id}", data={"message": "Oi"})

        assert response.status_code == 200
        assert response.json()["messages"][-1]["content"] == FALLBACK_RESPONSE


class TestChatErrors:

    def test_unknown_conversation_returns_404(self, client, conversation, fake_llm):
        response = client.post("/api/chat/nao-existe", data={"message": "Oi"})

        assert response.status_code == 404
        assert response.json()["detail"] == "Conversation not found"
        assert fake_llm.calls == []
        assert get_messages(client, conversation.id) == []

    def test_missing_message_returns_400(self, client, conversation, fake_llm):
        response = client.post(f"/api/chat/{conversation.id}", data={})

        assert response.status_code == 400
        assert fake_llm.calls == []
        assert get_messages(client, conversation.id) == []

    def test_missing_chatbot_returns_404(self, client, conversation, chatbot, auth_headers):
        assert client.delete(f"/api/chatbots/{chatbot.id}", headers=auth_headers).status_code == 204
        response = client.post(f"/api/chat/{conversation.id}", data={"message": "Oi"})

        assert response.status_code == 404
        assert response.json()["detail"] == "Chatbot not found"

    def test_llm_failure_keeps_user_message(self, client, conversation, fake_llm):
        fake_llm.error = RuntimeError("API indisponível")
        response = client.post(f"/api/chat/{conversation.id}", data={"message": "Oi"})

        assert response.status_code == 500
        assert response.json()["detail"] == "Failed to process chat message"
        messages = get_messages(client, conversation.id)
        assert [m["role"] for m in messages] == ["user"]
        assert messages[0]["content"] == "Oi"

    def test_file_over_limit_is_rejected(self, client, conversation, fake_llm):
        big = b"a" * (10 * 1024 * 1024 + 1)
        response = client.post(
            f"/api/chat/{conversation.id}",
            data={"message": "Leia"},
            files=[("files", ("grande.txt", big, "text/plain"))],
        )

        assert response.status_code == 413
        assert get_messages(client, conversation.id) == []


class SlowLLM:
    """Modelo que demora a responder, como uma chamada real à API."""

    def __init__(self, delay):
        self.delay = delay

    def invoke(self, messages, **_kwargs):
        time.sleep(self.delay)
        return AIMessage(content="Resposta lenta.")


class TestChatConcurrency:

    def test_slow_llm_does_not_block_other_requests(self, client, conversation):
        app.dependency_overrides[get_chat_model] = lambda: SlowLLM(delay=1.0)

        async def scenario():
            transport = httpx.ASGITransport(app=app)
            async with httpx.AsyncClient(transport=transport, base_url="http://test") as http:

                async def timed_health():
                    await asyncio.sleep(0.1)
                    started = time.perf_counter()
                    response = await http.get("/api/health")
                    return response, time.perf_counter() - started

                return await asyncio.gather(
                    http.post(f"/api/chat/{conversation.id}", data={"message": "Oi"}),
                    timed_health(),
                )

        chat_response, (health_response, elapsed) = asyncio.run(scenario())

        assert chat_response.status_code == 200
        assert chat_response.json()["messages"][-1]["content"] == "Resposta lenta."
        assert health_response.status_code == 200
        assert elapsed < 0.5
