# =============================================================================
# tests/test_todos.py - Todo Endpoint Tests
# =============================================================================
# Run with: pytest tests/test_todos.py -v
# =============================================================================

from datetime import datetime, timezone


def _create(client, headers, **fields):
    body = {"title": "Buy milk", **fields}
    response = client.post("/api/todos", json=body, headers=headers)
    assert response.status_code == 200, response.text
    return response.json()


class TestCreateTodo:
    """Tests for POST /api/todos."""

    def test_create_applies_defaults(self, client, auth_headers):
        todo = _create(client, auth_headers)

        assert todo["title"] == "Buy milk"
        assert todo["priority"] == 0
        assert todo["notifyBeforeMinutes"] == 30
        assert todo["completed"] is False
        assert todo["description"] is None
        assert todo["deadline"] is None
        assert "createdAt" in todo
        assert "userId" in todo

    def test_create_with_all_fields(self, client, auth_headers):
        todo = _create(
            client,
            auth_headers,
            title="Renew passport",
            description="Bring two photos",
            deadline="2020-01-01T09:00:00",
            notifyBeforeMinutes=60,
            priority=2,
            imageUrl="http://testserver/uploads/a.png",
            linkUrl="https://example.com",
        )

        assert todo["description"] == "Bring two photos"
        # Deadlines in the past are allowed
        assert todo["deadline"].startswith("2020-01-01T09:00:00")
        assert todo["notifyBeforeMinutes"] == 60
        assert todo["priority"] == 2
        assert todo["imageUrl"] == "http://testserver/uploads/a.png"
        assert todo["linkUrl"] == "https://example.com"

    def test_client_cannot_set_owner_or_completed(self, client, register_user):
        body, headers = register_user()

        todo = _create(client, headers, userId=999, completed=True, id=12345)

        assert todo["userId"] == body["user"]["id"]
        assert todo["completed"] is False
        assert todo["id"] != 12345

    def test_title_too_long(self, client, auth_headers):
        response = client.post("/api/todos", json={"title": "x" * 201}, headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "title"

    def test_title_at_max_length(self, client, auth_headers):
        todo = _create(client, auth_headers, title="x" * 200)

        assert len(todo["title"]) == 200

    def test_blank_title(self, client, auth_headers):
        response = client.post("/api/todos", json={"title": "   "}, headers=auth_headers)

        assert response.status_code == 400

    def test_invalid_priority(self, client, auth_headers):
        response = client.post("/api/todos", json={"title": "x", "priority": 3}, headers=auth_headers)

        assert response.status_code == 400

    def test_notify_before_minutes_bounds(self, client, auth_headers):
        too_low = client.post(
            "/api/todos", json={"title": "x", "notifyBeforeMinutes": -1}, headers=auth_headers
        )
        too_high = client.post(
            "/api/todos", json={"title": "x", "notifyBeforeMinutes": 1441}, headers=auth_headers
        )

        assert too_low.status_code == 400
        assert too_high.status_code == 400
        assert _create(client, auth_headers, notifyBeforeMinutes=1440)["notifyBeforeMinutes"] == 1440

    def test_failed_validation_writes_nothing(self, client, auth_headers):
        client.post("/api/todos", json={"title": ""}, headers=auth_headers)

        assert client.get("/api/todos", headers=auth_headers).json() == []


class TestReadTodos:
    """Tests for GET /api/todos and GET /api/todos/{id}."""

    def test_list_is_newest_first(self, client, auth_headers):
        first = _create(client, auth_headers, title="first")
        second = _create(client, auth_headers, title="second")
        third = _create(client, auth_headers, title="third")

        todos = client.get("/api/todos", headers=auth_headers).json()

        assert [todo["id"] for todo in todos] == [third["id"], second["id"], first["id"]]

    def test_list_empty(self, client, auth_headers):
        assert client.get("/api/todos", headers=auth_headers).json() == []

    def test_get_one(self, client, auth_headers):
        created = _create(client, auth_headers)

        response = client.get(f"/api/todos/{created['id']}", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == created

    def test_get_missing(self, client, auth_headers):
        response = client.get("/api/todos/9999", headers=auth_headers)

        assert response.status_code == 404
        assert response.json()["detail"] == "Todo not found"

    def test_non_numeric_id(self, client, auth_headers):
        response = client.get("/api/todos/abc", headers=auth_headers)

        assert response.status_code == 400


class TestUpdateTodo:
    """Tests for PUT /api/todos/{id}."""

    def test_update_replaces_fields(self, client, auth_headers):
        created = _create(client, auth_headers, description="old", priority=2, linkUrl="https://a.example")

        response = client.put(
            f"/api/todos/{created['id']}",
            json={"title": "Buy oat milk", "priority": 1},
            headers=auth_headers,
        )

        assert response.status_code == 200
        todo = response.json()
        assert todo["title"] == "Buy oat milk"
        assert todo["priority"] == 1
        # Omitted optional fields are cleared
        assert todo["description"] is None
        assert todo["linkUrl"] is None
        assert todo["createdAt"] == created["createdAt"]

    def test_update_keeps_completed(self, client, auth_headers):
        created = _create(client, auth_headers)
        client.patch(f"/api/todos/{created['id']}/toggle", headers=auth_headers)

        todo = client.put(
            f"/api/todos/{created['id']}",
            json={"title": "renamed", "completed": False},
            headers=auth_headers,
        ).json()

        assert todo["completed"] is True

    def test_update_missing(self, client, auth_headers):
        response = client.put("/api/todos/9999", json={"title": "x"}, headers=auth_headers)

        assert response.status_code == 404

    def test_invalid_update_leaves_row_unchanged(self, client, auth_headers):
        created = _create(client, auth_headers)

        response = client.put(
            f"/api/todos/{created['id']}", json={"title": "x" * 201}, headers=auth_headers
        )

        assert response.status_code == 400
        assert client.get(f"/api/todos/{created['id']}", headers=auth_headers).json() == created


class TestDeleteAndToggleTodo:
    """Tests for DELETE /api/todos/{id} and PATCH /api/todos/{id}/toggle."""

    def test_delete(self, client, auth_headers):
        created = _create(client, auth_headers)

        response = client.delete(f"/api/todos/{created['id']}", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == {"message": "Todo deleted", "id": created["id"]}
        assert client.get(f"/api/todos/{created['id']}", headers=auth_headers).status_code == 404

    def test_delete_twice(self, client, auth_headers):
        created = _create(client, auth_headers)
        client.delete(f"/api/todos/{created['id']}", headers=auth_headers)

        response = client.delete(f"/api/todos/{created['id']}", headers=auth_headers)

        assert response.status_code == 404

    def test_toggle_twice_restores(self, client, auth_headers):
        created = _create(client, auth_headers)

        once = client.patch(f"/api/todos/{created['id']}/toggle", headers=auth_headers).json()
        twice = client.patch(f"/api/todos/{created['id']}/toggle", headers=auth_headers).json()

        assert once["completed"] is True
        assert twice["completed"] is False
        assert twice["title"] == created["title"]

    def test_toggle_missing(self, client, auth_headers):
        response = client.patch("/api/todos/9999/toggle", headers=auth_headers)

        assert response.status_code == 404


def _parse_utc(value):
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    assert parsed.utcoffset() is not None and parsed.utcoffset().total_seconds() == 0, value
    return parsed


class TestTimestamps:
    """Timestamps go out as UTC with an explicit offset."""

    def test_offset_deadline_keeps_the_instant(self, client, auth_headers):
        created = _create(client, auth_headers, deadline="2030-01-01T09:00:00+09:00")
        fetched = client.get(f"/api/todos/{created['id']}", headers=auth_headers).json()

        expected = datetime(2030, 1, 1, 0, 0, tzinfo=timezone.utc)
        assert _parse_utc(created["deadline"]) == expected
        assert _parse_utc(fetched["deadline"]) == expected

    def test_created_at_is_utc_everywhere(self, client, auth_headers):
        todo = _create(client, auth_headers)
        item = client.post(
            "/api/items", json={"title": "Alien", "category": "movie"}, headers=auth_headers
        ).json()
        memo = client.post("/api/memos", json={"title": "Note"}, headers=auth_headers).json()
        profile = client.get("/api/auth/me", headers=auth_headers).json()

        for record in (todo, item, memo, profile):
            _parse_utc(record["createdAt"])

        listed = client.get("/api/todos", headers=auth_headers).json()
        assert listed[0]["createdAt"] == todo["createdAt"]
