"""
Pinnote Backend: Notes HTTP Contract Tests
============================================

What:  End-to-end tests of the routes through the ASGI app and an in-memory
       SQLite database.
How:   HTTPX AsyncClient with ASGITransport (see conftest.test_client).

What we test:
    ✅ Every route's success envelope and wire field names
    ✅ 400 / 404 / 500 error envelopes
    ✅ The observed edit quirks (isPinned alone is rejected, "" is ignored)
    ✅ Pinned-first listing, double delete, search, round trip
"""

import logging

import pytest
from unittest.mock import AsyncMock, patch
from uuid import uuid4

from pinnote.config import settings
from pinnote.database import drop_models
from pinnote.exceptions import DatabaseError


async def _create(client, **body):
    response = await client.post("/add-note", json=body)
    assert response.status_code == 200, response.text
    return response.json()["note"]


class TestGreetingAndHealth:

    @pytest.mark.asyncio
    async def test_root(self, test_client):
        response = await test_client.get("/")
        assert response.status_code == 200
        assert response.json() == {"data": "hello"}

    @pytest.mark.asyncio
    async def test_health(self, test_client):
        response = await test_client.get("/health")
        body = response.json()
        assert response.status_code == 200
        assert body["status"] == "healthy"
        assert body["database"] == "connected"

    @pytest.mark.asyncio
    async def test_request_id_echoed(self, test_client):
        response = await test_client.get("/", headers={"X-Request-ID": "abc123"})
        assert response.headers["X-Request-ID"] == "abc123"

    @pytest.mark.asyncio
    async def test_malformed_request_id_replaced(self, test_client):
        response = await test_client.get("/", headers={"X-Request-ID": "x" * 65})

        rid = response.headers["X-Request-ID"]
        assert rid != "x" * 65
        assert len(rid) == 8

    @pytest.mark.asyncio
    async def test_access_log_carries_note_id(self, test_client, caplog):
        note = await _create(test_client, title="A", content="B")
        caplog.set_level(logging.INFO, logger="pinnote.access")

        await test_client.delete(f"/delete-note/{note['_id']}")

        records = [r for r in caplog.records if r.name == "pinnote.access"]
        assert records[-1].note_id == note["_id"]
        assert records[-1].status == 200


class TestAddNote:

    @pytest.mark.asyncio
    async def test_defaults(self, test_client):
        response = await test_client.post("/add-note", json={"title": "A", "content": "B"})
        body = response.json()

        assert response.status_code == 200
        assert body["error"] is False
        assert body["message"] == "Note added successfully"
        assert body["note"]["tags"] == []
        assert body["note"]["isPinned"] is False
        assert "_id" in body["note"]
        assert "createdOn" in body["note"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "body, message",
        [
            ({"title": "", "content": "B"}, "Title is required"),
            ({"content": "B"}, "Title is required"),
            ({"title": "A", "content": ""}, "Content is required"),
            ({"title": "A"}, "Content is required"),
        ],
    )
    async def test_missing_fields_persist_nothing(self, test_client, body, message):
        response = await test_client.post("/add-note", json=body)

        assert response.status_code == 400
        assert response.json()["error"] is True
        assert response.json()["message"] == message

        listing = await test_client.get("/get-all-notes")
        assert listing.json()["notes"] == []

    @pytest.mark.asyncio
    async def test_malformed_body_is_400(self, test_client):
        response = await test_client.post(
            "/add-note", json={"title": "A", "content": "B", "tags": "not-a-list"}
        )
        assert response.status_code == 400
        assert response.json()["error"] is True


class TestEditNote:

    @pytest.mark.asyncio
    async def test_partial_update(self, test_client):
        note = await _create(test_client, title="Old", content="Body", tags=["x"])

        response = await test_client.put(
            f"/edit-note/{note['_id']}", json={"title": "New", "content": ""}
        )
        body = response.json()

        assert response.status_code == 200
        assert body["message"] == "Note update successfully"
        assert body["note"]["title"] == "New"
        assert body["note"]["content"] == "Body"
        assert body["note"]["tags"] == ["x"]

    @pytest.mark.asyncio
    async def test_unknown_id(self, test_client):
        response = await test_client.put(f"/edit-note/{uuid4()}", json={"title": "New"})

        assert response.status_code == 404
        assert response.json() == {
            "error": True,
            "message": "Note not found",
            "request_id": response.headers["X-Request-ID"],
        }

    @pytest.mark.asyncio
    async def test_malformed_id_is_not_found(self, test_client):
        response = await test_client.put("/edit-note/12345", json={"title": "New"})
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_pin_only_rejected(self, test_client):
        note = await _create(test_client, title="A", content="B")

        response = await test_client.put(f"/edit-note/{note['_id']}", json={"isPinned": True})

        assert response.status_code == 400
        assert response.json()["message"] == "No changes provided"

    @pytest.mark.asyncio
    async def test_pin_applied_alongside_other_change(self, test_client):
        note = await _create(test_client, title="A", content="B")

        response = await test_client.put(
            f"/edit-note/{note['_id']}", json={"title": "A2", "isPinned": True}
        )

        assert response.json()["note"]["isPinned"] is True


class TestListDeletePin:

    @pytest.mark.asyncio
    async def test_pinned_first(self, test_client):
        n1 = await _create(test_client, title="N1", content="unpinned")
        n2 = await _create(test_client, title="N2", content="pinned")
        await test_client.put(f"/update-note-pinned/{n2['_id']}", json={"isPinned": True})

        response = await test_client.get("/get-all-notes")
        body = response.json()

        assert body["error"] is False
        assert body["message"] == "All note retrieved successfully"
        assert [n["_id"] for n in body["notes"]] == [n2["_id"], n1["_id"]]

    @pytest.mark.asyncio
    async def test_delete_twice(self, test_client):
        note = await _create(test_client, title="A", content="B")

        first = await test_client.delete(f"/delete-note/{note['_id']}")
        second = await test_client.delete(f"/delete-note/{note['_id']}")

        assert first.status_code == 200
        assert first.json() == {"error": False, "message": "Note deleted successfully"}
        assert second.status_code == 404

    @pytest.mark.asyncio
    async def test_update_pinned(self, test_client):
        note = await _create(test_client, title="A", content="B")

        pinned = await test_client.put(
            f"/update-note-pinned/{note['_id']}", json={"isPinned": True}
        )
        unpinned = await test_client.put(
            f"/update-note-pinned/{note['_id']}", json={"isPinned": False}
        )

        assert pinned.json()["note"]["isPinned"] is True
        assert pinned.json()["message"] == "Note update successfully"
        assert unpinned.json()["note"]["isPinned"] is False
        assert unpinned.json()["note"]["title"] == "A"

    @pytest.mark.asyncio
    async def test_update_pinned_without_body(self, test_client):
        note = await _create(test_client, title="A", content="B")

        response = await test_client.put(f"/update-note-pinned/{note['_id']}")
        message = response.json()["message"]

        assert response.status_code == 400
        assert message.startswith("Invalid request: body ")
        assert "  " not in message

    @pytest.mark.asyncio
    async def test_update_pinned_unknown_id(self, test_client):
        response = await test_client.put(
            f"/update-note-pinned/{uuid4()}", json={"isPinned": True}
        )
        assert response.status_code == 404


class TestSearch:

    @pytest.mark.asyncio
    async def test_query_required(self, test_client):
        response = await test_client.get("/search-notes")

        assert response.status_code == 400
        assert response.json()["message"] == "Search query is required"

    @pytest.mark.asyncio
    async def test_matches_title_case_insensitively(self, test_client):
        await _create(test_client, title="Hello World", content="first note")
        await _create(test_client, title="Groceries", content="milk")

        response = await test_client.get("/search-notes", params={"query": "hello"})
        body = response.json()

        assert response.status_code == 200
        assert body["message"] == "Notes matching the search query retrieved successfully"
        assert [n["title"] for n in body["notes"]] == ["Hello World"]

    @pytest.mark.asyncio
    @pytest.mark.skipif(
        settings.is_sqlite, reason="SQLite LIKE folds ASCII case only"
    )
    async def test_matches_non_ascii_case_insensitively(self, test_client):
        await _create(test_client, title="ÄPFEL", content="kaufen")

        response = await test_client.get("/search-notes", params={"query": "äpfel"})

        assert [n["title"] for n in response.json()["notes"]] == ["ÄPFEL"]

    @pytest.mark.asyncio
    async def test_trailing_slash_path(self, test_client):
        await _create(test_client, title="Hello World", content="first note")

        response = await test_client.get("/search-notes/", params={"query": "WORLD"})

        assert response.status_code == 200
        assert len(response.json()["notes"]) == 1


class TestRoundTrip:

    @pytest.mark.asyncio
    async def test_create_then_list(self, test_client):
        created = await _create(
            test_client, title="Trip", content="Pack bags", tags=["travel", "todo"]
        )

        first = (await test_client.get("/get-all-notes")).json()["notes"]
        second = (await test_client.get("/get-all-notes")).json()["notes"]

        assert len(first) == 1
        fetched = first[0]
        assert fetched["_id"] == created["_id"]
        assert fetched["title"] == "Trip"
        assert fetched["content"] == "Pack bags"
        assert fetched["tags"] == ["travel", "todo"]
        assert fetched["createdOn"]
        assert fetched["createdOn"] == created["createdOn"]
        assert second[0]["_id"] == fetched["_id"]
        assert second[0]["createdOn"] == fetched["createdOn"]


class TestServerErrors:

    @pytest.mark.asyncio
    async def test_store_failure_is_generic_500(self, test_client):
        await drop_models()

        response = await test_client.get("/get-all-notes")

        assert response.status_code == 500
        assert response.json()["error"] is True
        assert response.json()["message"] == "Internal Server Error"

    @pytest.mark.asyncio
    async def test_service_error_hides_context(self, test_client):
        failing = AsyncMock(side_effect=DatabaseError(context={"sql": "SELECT secret"}))
        with patch("pinnote.routes.notes.note_service.add_note", failing):
            response = await test_client.post("/add-note", json={"title": "A", "content": "B"})

        assert response.status_code == 500
        assert "secret" not in response.text
