import json


def test_history_requires_session(client):
    resp = client.get("/api/history")
    assert resp.status_code == 401
    assert resp.get_json()["error"] == "AuthError"


def test_history_is_scoped_to_session_user(app, provider, register):
    alice = app.test_client()
    bob = app.test_client()
    register("alice@example.com", http=alice)
    register("bob@example.com", http=bob)

    alice.post("/api/translate", json={"text": "Hello", "to": "es"})
    alice.post("/api/translate", json={"text": "Good night", "to": "de"})
    bob.post("/api/translate", json={"text": "Thanks", "to": "fr"})

    alice_history = alice.get("/api/history").get_json()
    bob_history = bob.get("/api/history").get_json()

    assert [e["originalText"] for e in alice_history] == ["Good night", "Hello"]
    assert [e["originalText"] for e in bob_history] == ["Thanks"]


def test_history_after_logout_is_401(client, provider, register):
    register("carol@example.com")
    client.post("/api/translate", json={"text": "Hello", "to": "es"})
    client.post("/api/auth/logout")

    assert client.get("/api/history").status_code == 401


def test_history_persists_across_login(app, provider, register):
    first = app.test_client()
    register("dave@example.com", "pw-dave", http=first)
    first.post("/api/translate", json={"text": "Hello", "to": "es"})

    second = app.test_client()
    second.post("/api/auth/login", json={"email": "dave@example.com", "password": "pw-dave"})

    assert [e["originalText"] for e in second.get("/api/history").get_json()] == ["Hello"]


def test_corrupt_history_is_storage_error(app, client, provider, register, data_dir):
    register("erin@example.com")
    user_id = client.get("/api/auth/me").get_json()["id"]
    (data_dir / "history.json").write_text(json.dumps({user_id: "oops"}), encoding="utf-8")

    resp = client.get("/api/history")

    assert resp.status_code == 500
    assert resp.get_json()["error"] == "StorageError"
