import json
import threading


class TestAuthApi:
    """注册 / 登录 / 会话相关接口"""

    def test_health(self, client):
        resp = client.get("/api/health")
        assert resp.status_code == 200
        assert resp.get_json() == {"ok": True}

    def test_register_returns_public_view_and_logs_in(self, client, register):
        resp = register("alice@example.com", "s3cret-pass", name="Alice")

        assert resp.status_code == 200
        body = resp.get_json()
        assert set(body) == {"id", "email", "name"}
        assert body["email"] == "alice@example.com"
        assert body["name"] == "Alice"

        me = client.get("/api/auth/me").get_json()
        assert me == body

    def test_register_defaults_name(self, register):
        assert register("bob@example.com").get_json()["name"] == "bob"

    def test_register_duplicate_email_case_insensitive(self, register):
        first = register("carol@example.com")
        second = register("CAROL@Example.COM", "other-pass")

        assert first.status_code == 200
        assert second.status_code == 409
        body = second.get_json()
        assert body["error"] == "ConflictError"
        assert body["message"] == "Email already registered"

    def test_register_missing_fields(self, client):
        for payload in ({"email": "x@example.com"}, {"password": "pw"}, {}):
            resp = client.post("/api/auth/register", json=payload)
            assert resp.status_code == 400
            assert resp.get_json()["error"] == "ValidationError"

    def test_register_invalid_email(self, register):
        assert register("not-an-email").status_code == 400

    def test_login_success(self, app, register):
        register("dave@example.com", "pw-dave")
        other = app.test_client()

        resp = other.post("/api/auth/login", json={"email": "DAVE@example.com", "password": "pw-dave"})

        assert resp.status_code == 200
        assert resp.get_json()["email"] == "dave@example.com"
        assert other.get("/api/auth/me").get_json()["email"] == "dave@example.com"

    def test_login_wrong_password(self, app, register):
        register("erin@example.com", "pw-erin")
        other = app.test_client()

        resp = other.post("/api/auth/login", json={"email": "erin@example.com", "password": "nope"})

        assert resp.status_code == 401
        assert resp.get_json()["error"] == "AuthError"
        assert other.get("/api/auth/me").get_json() is None

    def test_login_unknown_email(self, client):
        resp = client.post("/api/auth/login", json={"email": "ghost@example.com", "password": "pw"})
        assert resp.status_code == 401

    def test_login_missing_fields(self, client):
        resp = client.post("/api/auth/login", json={"email": "ghost@example.com"})
        assert resp.status_code == 400

    def test_me_anonymous_is_null(self, client):
        resp = client.get("/api/auth/me")
        assert resp.status_code == 200
        assert resp.get_json() is None

    def test_logout_invalidates_session(self, app, client, register):
        register("frank@example.com")
        with client.session_transaction() as sess:
            sid = sess["sid"]

        resp = client.post("/api/auth/logout")

        assert resp.status_code == 200
        assert resp.get_json() == {"ok": True}
        assert client.get("/api/auth/me").get_json() is None
        assert app.extensions["session_store"].get(sid) is None

    def test_replayed_cookie_after_logout_is_anonymous(self, app, client, register):
        register("grace@example.com")
        with client.session_transaction() as sess:
            sid = sess["sid"]
        client.post("/api/auth/logout")

        replay = app.test_client()
        with replay.session_transaction() as sess:
            sess["sid"] = sid

        assert replay.get("/api/auth/me").get_json() is None
        assert replay.get("/api/history").status_code == 401

    def test_corrupt_user_file_is_storage_error(self, app, client, data_dir):
        (data_dir / "users.json").write_text("{oops", encoding="utf-8")

        resp = client.post("/api/auth/login", json={"email": "a@example.com", "password": "pw"})

        assert resp.status_code == 500
        assert resp.get_json()["error"] == "StorageError"

    def test_unknown_route_is_404_payload(self, client):
        resp = client.get("/api/nope")
        assert resp.status_code == 404
        assert resp.get_json()["error"] == "NotFound"

    def test_non_object_body_is_validation_error(self, client):
        for path in ("/api/auth/register", "/api/auth/login"):
            for payload in (["alice@example.com", "pw"], "alice@example.com", 42):
                resp = client.post(path, json=payload)
                assert resp.status_code == 400, path
                body = resp.get_json()
                assert body["error"] == "ValidationError"
                assert body["message"] == "Request body must be a JSON object"

    def test_concurrent_registration_same_email(self, app, data_dir):
        barrier = threading.Barrier(2)
        statuses = []

        def _register(email):
            http = app.test_client()
            barrier.wait()
            resp = http.post("/api/auth/register", json={"email": email, "password": "pw-race"})
            statuses.append(resp.status_code)

        workers = [
            threading.Thread(target=_register, args=("race@example.com",)),
            threading.Thread(target=_register, args=("RACE@example.com",)),
        ]
        for t in workers:
            t.start()
        for t in workers:
            t.join(timeout=30)

        assert sorted(statuses) == [200, 409]
        users = json.loads((data_dir / "users.json").read_text(encoding="utf-8"))
        assert len(users) == 1
