from datetime import datetime, timedelta, timezone


def create_todo(client, title="Test Task"):
    res = client.post("/api/todos", json={"title": title})
    assert res.status_code == 200
    return res.json()


def parse_timestamp(value: str) -> datetime:
    # fromisoformat only learned the "Z" suffix in Python 3.11
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def assert_todo_shape(todo: dict):
    # Basic structure validation
    for key in ["id", "title", "done", "createdAt"]:
        assert key in todo
    assert "created_at" not in todo
    # Type-ish checks
    assert isinstance(todo["id"], int)
    assert isinstance(todo["title"], str)
    assert isinstance(todo["done"], bool)
    # Timestamps carry an explicit UTC offset so browsers do not read them as local time
    created = parse_timestamp(todo["createdAt"])
    assert created.utcoffset() == timedelta(0)
    assert abs(datetime.now(timezone.utc) - created) < timedelta(minutes=5)


class TestCreate:
    def test_create_todo(self, client):
        res = client.post("/api/todos", json={"title": "Buy milk"})
        assert res.status_code == 200
        todo = res.json()
        assert_todo_shape(todo)
        assert todo["id"] is not None
        assert todo["title"] == "Buy milk"
        assert todo["done"] is False

    def test_create_trims_title(self, client):
        todo = create_todo(client, "   Water plants  ")
        assert todo["title"] == "Water plants"

    def test_blank_titles_are_rejected(self, client):
        for payload in ({"title": ""}, {"title": "   "}, {"title": "\t\n"}, {"title": None}, {}):
            res = client.post("/api/todos", json=payload)
            assert res.status_code == 400, payload
            assert res.json() == {"error": "Title is required."}

        # Nothing was inserted
        assert client.get("/api/todos").json() == []

    def test_ids_increase(self, client):
        first = create_todo(client, "one")
        second = create_todo(client, "two")
        assert second["id"] > first["id"]


class TestList:
    def test_list_empty(self, client):
        res = client.get("/api/todos")
        assert res.status_code == 200
        assert res.json() == []

    def test_list_newest_id_first(self, client):
        first = create_todo(client, "first")
        second = create_todo(client, "second")

        res = client.get("/api/todos")
        assert res.status_code == 200
        items = res.json()
        assert [t["id"] for t in items] == [second["id"], first["id"]]
        for item in items:
            assert_todo_shape(item)


class TestToggle:
    def test_done_flips_only_that_row(self, client):
        a = create_todo(client, "a")
        b = create_todo(client, "b")

        res = client.put(f"/api/todos/{a['id']}/done")
        assert res.status_code == 200
        assert res.json() == {"success": True}

        by_id = {t["id"]: t for t in client.get("/api/todos").json()}
        assert by_id[a["id"]]["done"] is True
        assert by_id[b["id"]]["done"] is False
        assert by_id[a["id"]]["title"] == "a"
        assert by_id[a["id"]]["createdAt"] == a["createdAt"]

    def test_undone_restores(self, client):
        a = create_todo(client, "a")
        client.put(f"/api/todos/{a['id']}/done")

        res = client.put(f"/api/todos/{a['id']}/undone")
        assert res.status_code == 200
        assert res.json() == {"success": True}
        assert client.get("/api/todos").json()[0]["done"] is False

    def test_toggle_unknown_id_is_noop(self, client):
        a = create_todo(client, "a")
        for suffix in ("done", "undone"):
            res = client.put(f"/api/todos/999999/{suffix}")
            assert res.status_code == 200
            assert res.json() == {"success": True}
        assert client.get("/api/todos").json() == [a]

    def test_non_integer_id(self, client):
        res = client.put("/api/todos/abc/done")
        assert res.status_code == 422
        assert res.json()["error"] == "ValidationError"


class TestDelete:
    def test_delete_removes_exactly_one(self, client):
        a = create_todo(client, "a")
        b = create_todo(client, "b")
        client.put(f"/api/todos/{a['id']}/done")

        res = client.delete(f"/api/todos/{a['id']}")
        assert res.status_code == 200
        assert res.json() == {"success": True}

        remaining = client.get("/api/todos").json()
        assert [t["id"] for t in remaining] == [b["id"]]

    def test_delete_unknown_id_is_noop(self, client):
        a = create_todo(client, "a")
        res = client.delete("/api/todos/424242")
        assert res.status_code == 200
        assert res.json() == {"success": True}
        assert len(client.get("/api/todos").json()) == 1

        # Deleting twice is fine too
        client.delete(f"/api/todos/{a['id']}")
        res_again = client.delete(f"/api/todos/{a['id']}")
        assert res_again.status_code == 200
        assert res_again.json() == {"success": True}

    def test_delete_open_todo_allowed_by_default(self, client, override_settings):
        override_settings(require_done_for_delete=False)
        a = create_todo(client, "a")
        res = client.delete(f"/api/todos/{a['id']}")
        assert res.status_code == 200
        assert client.get("/api/todos").json() == []

    def test_delete_guard_refuses_open_todo(self, client, override_settings):
        override_settings(require_done_for_delete=True)
        a = create_todo(client, "a")

        res = client.delete(f"/api/todos/{a['id']}")
        assert res.status_code == 400
        assert res.json() == {"error": "Only completed tasks can be deleted."}
        assert len(client.get("/api/todos").json()) == 1

        client.put(f"/api/todos/{a['id']}/done")
        res_done = client.delete(f"/api/todos/{a['id']}")
        assert res_done.status_code == 200
        assert client.get("/api/todos").json() == []

        # Unknown ids stay a no-op with the guard on
        assert client.delete("/api/todos/999999").json() == {"success": True}


class TestValidationErrors:
    def test_malformed_json_body(self, client):
        res = client.post(
            "/api/todos",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )
        assert res.status_code == 422
        body = res.json()
        assert body.get("error") == "ValidationError"
        assert body.get("message") == "Request validation failed"
        assert isinstance(body.get("detail"), list)

    def test_wrong_title_type(self, client):
        res = client.post("/api/todos", json={"title": ["not", "a", "string"]})
        assert res.status_code == 422
        assert res.json()["error"] == "ValidationError"
