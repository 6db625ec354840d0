import asyncio

import pytest

from storefront_api.app.core.completion import CompletionClient, CompletionError
from storefront_api.app.schemas.chat import ChatMessageCreate
from storefront_api.app.services.chat_service import CHAT_MAX_TOKENS, FALLBACK_REPLY, SYSTEM_PROMPT, ChatService

from conftest import FakeCompletion


def test_send_message_stores_both_sides(store):
    completion = FakeCompletion(reply="We ship worldwide.")
    service = ChatService(store, completion)

    reply = asyncio.run(service.send_message(ChatMessageCreate(user_id=1, message="Do you ship to Canada?")))

    assert reply.is_bot is True
    assert reply.message == "We ship worldwide."
    history = service.get_chat_messages(1)
    assert [(m.is_bot, m.message) for m in history] == [
        (False, "Do you ship to Canada?"),
        (True, "We ship worldwide."),
    ]


def test_completion_receives_history_and_system_prompt(store):
    completion = FakeCompletion()
    service = ChatService(store, completion)

    asyncio.run(service.send_message(ChatMessageCreate(user_id=1, message="Hi")))
    asyncio.run(service.send_message(ChatMessageCreate(user_id=1, message="Returns?")))

    last_call = completion.calls[-1]
    assert last_call["system"] == SYSTEM_PROMPT
    assert last_call["max_tokens"] == CHAT_MAX_TOKENS
    assert last_call["turns"] == [
        ("user", "Hi"),
        ("assistant", "Happy to help!"),
        ("user", "Returns?"),
    ]


def test_failed_completion_falls_back_to_apology(store):
    service = ChatService(store, FakeCompletion(error=CompletionError("boom")))

    reply = asyncio.run(service.send_message(ChatMessageCreate(user_id=7, message="Hello?")))

    assert reply.message == FALLBACK_REPLY
    assert len(service.get_chat_messages(7)) == 2


def test_empty_completion_falls_back_to_apology(store):
    service = ChatService(store, FakeCompletion(reply=""))
    reply = asyncio.run(service.send_message(ChatMessageCreate(user_id=1, message="Hello?")))
    assert reply.message == FALLBACK_REPLY


def test_conversations_are_per_user(store):
    service = ChatService(store, FakeCompletion())
    asyncio.run(service.send_message(ChatMessageCreate(user_id=1, message="A")))
    asyncio.run(service.send_message(ChatMessageCreate(user_id=2, message="B")))
    assert [m.message for m in service.get_chat_messages(2)] == ["B", "Happy to help!"]


def test_client_without_key_raises_completion_error():
    client = CompletionClient(api_key="")
    with pytest.raises(CompletionError):
        asyncio.run(client.complete("system", [("user", "hi")]))


def test_build_messages_puts_system_first():
    messages = CompletionClient.build_messages("sys", [("user", "a"), ("assistant", "b")])
    assert messages == [
        {"role": "system", "content": "sys"},
        {"role": "user", "content": "a"},
        {"role": "assistant", "content": "b"},
    ]
