from storefront_api.app.core.completion import CompletionError
from storefront_api.app.services.chat_service import FALLBACK_REPLY


EVENT = {
    "name": "Tech Summit",
    "organizerId": 1,
    "startDate": "2025-09-01T10:00:00Z",
    "endDate": "2025-09-03T18:00:00Z",
}


def test_chat_round_trip(client, completion):
    response = client.post("/api/chat", json={"userId": 1, "message": "Do you ship to Canada?"})
    assert response.status_code == 201
    assert response.json()["isBot"] is True
    assert response.json()["message"] == "Happy to help!"

    history = client.get("/api/chat/1").json()
    assert [m["isBot"] for m in history] == [False, True]
    assert len(completion.calls) == 1


def test_chat_falls_back_when_completion_fails(client, completion):
    completion.error = CompletionError("unavailable")
    response = client.post("/api/chat", json={"userId": 1, "message": "Hello"})
    assert response.status_code == 201
    assert response.json()["message"] == FALLBACK_REPLY


def test_empty_chat_message_is_400(client):
    assert client.post("/api/chat", json={"userId": 1, "message": ""}).status_code == 400


def test_generate_content(client, completion):
    completion.reply = "Early bird tickets are live!"
    event_id = client.post("/api/events", json=EVENT).json()["id"]

    response = client.post("/api/ai/generate-content", json={"prompt": "Early bird", "eventId": event_id, "platform": 3})

    assert response.status_code == 200
    assert response.json() == {"content": "Early bird tickets are live!", "event": "Tech Summit", "platform": "Instagram"}


def test_generate_content_unknown_event_is_404(client):
    response = client.post("/api/ai/generate-content", json={"prompt": "x", "eventId": 999})
    assert response.status_code == 404


def test_generate_content_failure_is_502(client, completion):
    completion.error = CompletionError("unavailable")
    event_id = client.post("/api/events", json=EVENT).json()["id"]
    response = client.post("/api/ai/generate-content", json={"prompt": "x", "eventId": event_id})
    assert response.status_code == 502
