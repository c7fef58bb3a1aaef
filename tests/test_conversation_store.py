# FILE: tests/test_conversation_store.py
"""
Testes do armazenamento de mensagens da conversa (somente anexação).
"""
import uuid
from datetime import datetime

import pytest

from app.controllers.conversation import (
    ConversationNotFoundError,
    append_message,
    get_conversation,
)
from app.schemas.conversation import MessageCreate


def test_get_returns_none_for_unknown_conversation(db):
    assert get_conversation("nao-existe", db) is None


def test_append_keeps_insertion_order(db, conversation):
    for i in range(5):
        role = "user" if i % 2 == 0 else "assistant"
        append_message(conversation.id, MessageCreate(role=role, content=f"mensagem {i}"), db)

    stored = get_conversation(conversation.id, db).messages
    assert [m["content"] for m in stored] == [f"mensagem {i}" for i in range(5)]
    assert [m["role"] for m in stored] == ["user", "assistant", "user", "assistant", "user"]


def test_append_generates_id_and_timestamp(db, conversation):
    stored = append_message(conversation.id, MessageCreate(role="user", content="oi"), db)

    uuid.UUID(stored["id"])
    datetime.fromisoformat(stored["timestamp"])
    assert stored["role"] == "user"
    assert stored["content"] == "oi"


def test_append_does_not_change_previous_messages(db, conversation):
    first = append_message(conversation.id, MessageCreate(role="user", content="um"), db)
    append_message(conversation.id, MessageCreate(role="assistant", content="dois"), db)

    stored = get_conversation(conversation.id, db).messages
    assert stored[0] == first
    assert len({m["id"] for m in stored}) == 2


def test_append_to_unknown_conversation_raises(db):
    with pytest.raises(ConversationNotFoundError):
        append_message("nao-existe", MessageCreate(role="user", content="oi"), db)
