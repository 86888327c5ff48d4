from charify.config import Settings, get_settings


def identity_headers(user_id, role):
    return {"X-User-Id": user_id, "X-User-Role": role}


REQUESTER = identity_headers("u1", "requester")
TAKER = identity_headers("u2", "taker")
OUTSIDER = identity_headers("u3", "taker")


def test_list_requests(client):
    response = client.get("/api/requests")

    assert response.status_code == 200
    assert [r["id"] for r in response.json()["requests"]] == [1, 2]


def test_get_unknown_request(client):
    response = client.get("/api/requests/99")

    assert response.status_code == 404
    assert response.json() == {"ok": False, "error": "Request not found"}


def test_chat_requires_identity(client):
    response = client.get("/api/chat/1")

    assert response.status_code == 401
    assert response.json()["ok"] is False


def test_chat_rejects_unknown_role(client):
    response = client.get("/api/chat/1", headers=identity_headers("u1", "admin"))

    assert response.status_code == 400
    assert "Invalid role" in response.json()["error"]


def test_conversation_round_trip(client):
    first = client.post("/api/chat/1", json={"text": "Hello"}, headers=REQUESTER)
    second = client.post("/api/chat/1", json={"text": "Hi"}, headers=TAKER)

    assert first.status_code == 200
    assert first.json()["sent"] is True
    assert first.json()["message"]["sequence"] == 1
    assert second.json()["message"]["sender_role"] == "taker"

    conversation = client.get("/api/chat/1", headers=TAKER).json()
    assert conversation["ok"] is True
    assert conversation["request"]["title"] == "Groceries for an elderly neighbour"
    assert conversation["summary"] == "Flour, rice and lentils for the week."
    assert [(m["sequence"], m["text"]) for m in conversation["messages"]] == [(1, "Hello"), (2, "Hi")]


def test_outsider_gets_denied_without_messages(client):
    client.post("/api/chat/1", json={"text": "private"}, headers=REQUESTER)

    read = client.get("/api/chat/1", headers=OUTSIDER)
    write = client.post("/api/chat/1", json={"text": "hi"}, headers=OUTSIDER)

    assert read.status_code == 403
    assert read.json() == {"ok": False, "error": "You are not authorized to view this chat"}
    assert write.status_code == 403


def test_chat_for_unknown_request(client):
    assert client.get("/api/chat/99", headers=REQUESTER).status_code == 404
    assert client.post("/api/chat/99", json={"text": "hi"}, headers=REQUESTER).status_code == 404


def test_empty_send_is_silent(client, chat_store):
    response = client.post("/api/chat/1", json={}, headers=REQUESTER)

    assert response.status_code == 200
    assert response.json() == {"ok": True, "sent": False, "message": None}
    assert chat_store.count(1) == 0


def test_attachment_upload_send_and_download(client):
    upload = client.post(
        "/api/attachments",
        content=b"\x89PNG fake",
        headers={**REQUESTER, "Content-Type": "image/png", "X-Filename": "receipt.png"},
    )
    assert upload.status_code == 200
    body = upload.json()
    assert body["size"] == len(b"\x89PNG fake")
    ref = body["attachment_ref"]

    sent = client.post("/api/chat/1", json={"attachment_ref": ref}, headers=REQUESTER)
    assert sent.json()["message"]["attachment_ref"] == ref
    assert sent.json()["message"]["text"] is None

    download = client.get(f"/api/attachments/{ref}", headers=TAKER)
    assert download.status_code == 200
    assert download.content == b"\x89PNG fake"
    assert download.headers["content-type"] == "image/png"


def test_empty_attachment_rejected(client):
    response = client.post("/api/attachments", content=b"", headers=REQUESTER)
    assert response.status_code == 400


def test_oversized_attachment_rejected(client):
    response = client.post("/api/attachments", content=b"x" * 2048, headers=REQUESTER)
    assert response.status_code == 400
    assert "limit" in response.json()["error"]


def test_send_with_unknown_attachment_blocked(client, chat_store):
    response = client.post("/api/chat/1", json={"text": "see file", "attachment_ref": "att-nope"}, headers=REQUESTER)

    assert response.status_code == 400
    assert chat_store.count(1) == 0


def test_attachment_download_requires_identity_and_known_ref(client):
    assert client.get("/api/attachments/att-nope").status_code == 401
    assert client.get("/api/attachments/att-nope", headers=REQUESTER).status_code == 404


def test_invalid_request_id_uses_error_shape(client):
    response = client.get("/api/chat/abc", headers=REQUESTER)

    assert response.status_code == 422
    assert response.json()["error"] == "Invalid request"


def test_camel_case_attachment_ref_is_honoured(client, chat_store):
    blocked = client.post("/api/chat/1", json={"text": "see file", "attachmentRef": "att-nope"}, headers=REQUESTER)

    assert blocked.status_code == 400
    assert chat_store.count(1) == 0

    ref = client.post("/api/attachments", content=b"scan", headers=REQUESTER).json()["attachment_ref"]
    sent = client.post("/api/chat/1", json={"text": "see file", "attachmentRef": ref}, headers=REQUESTER)

    assert sent.status_code == 200
    assert sent.json()["message"]["attachment_ref"] == ref


def test_unknown_draft_fields_rejected(client, chat_store):
    response = client.post("/api/chat/1", json={"text": "hi", "file": "blob:abc"}, headers=REQUESTER)

    assert response.status_code == 422
    assert chat_store.count(1) == 0


def test_uploads_refused_when_attachments_disabled(client, attachment_store):
    from charify.app import app

    app.dependency_overrides[get_settings] = lambda: Settings(max_attachment_bytes=0)

    response = client.post("/api/attachments", content=b"x", headers=REQUESTER)

    assert response.status_code == 400
    assert response.json()["error"] == "Attachments disabled"
    assert len(attachment_store) == 0


def test_upload_over_configured_limit_rejected_before_storing(client, attachment_store):
    from charify.app import app

    app.dependency_overrides[get_settings] = lambda: Settings(max_attachment_bytes=16)

    declared = client.post("/api/attachments", content=b"x" * 100, headers=REQUESTER)
    chunked = client.post("/api/attachments", content=iter([b"x" * 10] * 5), headers=REQUESTER)

    assert declared.status_code == 400
    assert "limit" in declared.json()["error"]
    assert chunked.status_code == 400
    assert "limit" in chunked.json()["error"]
    assert len(attachment_store) == 0
