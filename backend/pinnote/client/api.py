"""
Pinnote Client: HTTP wrapper for the notes API
================================================

What:  One coroutine per endpoint of the notes contract.
How:   httpx.AsyncClient; responses are parsed into the same pydantic models
       the server emits. Any non-2xx answer raises ClientRequestError with the
       server's `message`.

Usage:
    async with NotesAPI() as api:
        notes = await api.get_all_notes()
        note = await api.add_note("Groceries", "milk, eggs", tags=["home"])

Tests hand in an AsyncClient bound to the ASGI app:
    NotesAPI(client=AsyncClient(transport=ASGITransport(app=app), base_url="http://test"))
"""

import logging
from typing import Any, Dict, List, Optional
from uuid import UUID

import httpx

from pinnote.config import settings
from pinnote.schemas.note import NoteResponse

logger = logging.getLogger("pinnote.client")


class ClientRequestError(Exception):
    """The API answered with an error status."""

    def __init__(self, status_code: int, message: str, path: str = ""):
        self.status_code = status_code
        self.message = message
        self.path = path
        super().__init__(f"{status_code} {path}: {message}")


class NotesAPI:
    """
    Async client for the notes API.

    Owns its httpx.AsyncClient unless one is passed in, in which case the
    caller is responsible for closing it.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=base_url or settings.api_base_url,
            timeout=timeout if timeout is not None else settings.client_timeout,
        )

    async def __aenter__(self) -> "NotesAPI":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def _request(self, method: str, path: str, **kwargs) -> Dict[str, Any]:
        response = await self._client.request(method, path, **kwargs)
        try:
            payload = response.json()
        except ValueError:
            payload = {}

        if response.is_error:
            message = payload.get("message") if isinstance(payload, dict) else None
            raise ClientRequestError(
                status_code=response.status_code,
                message=message or response.reason_phrase,
                path=path,
            )
        return payload

    @staticmethod
    def _notes(payload: Dict[str, Any]) -> List[NoteResponse]:
        return [NoteResponse.model_validate(item) for item in payload.get("notes", [])]

    # ── Endpoints ─────────────────────────────────────────────────────────

    async def greet(self) -> str:
        """GET / and return the `data` field."""
        payload = await self._request("GET", "/")
        return payload["data"]

    async def get_all_notes(self) -> List[NoteResponse]:
        """GET /get-all-notes, pinned notes first."""
        return self._notes(await self._request("GET", "/get-all-notes"))

    async def add_note(
        self,
        title: str,
        content: str,
        tags: Optional[List[str]] = None,
    ) -> NoteResponse:
        """POST /add-note."""
        body: Dict[str, Any] = {"title": title, "content": content}
        if tags is not None:
            body["tags"] = tags
        payload = await self._request("POST", "/add-note", json=body)
        return NoteResponse.model_validate(payload["note"])

    async def edit_note(
        self,
        note_id: UUID,
        title: Optional[str] = None,
        content: Optional[str] = None,
        tags: Optional[List[str]] = None,
        is_pinned: Optional[bool] = None,
    ) -> NoteResponse:
        """PUT /edit-note/{id} with only the fields given."""
        body: Dict[str, Any] = {}
        if title is not None:
            body["title"] = title
        if content is not None:
            body["content"] = content
        if tags is not None:
            body["tags"] = tags
        if is_pinned is not None:
            body["isPinned"] = is_pinned
        payload = await self._request("PUT", f"/edit-note/{note_id}", json=body)
        return NoteResponse.model_validate(payload["note"])

    async def delete_note(self, note_id: UUID) -> str:
        """DELETE /delete-note/{id}; returns the server message."""
        payload = await self._request("DELETE", f"/delete-note/{note_id}")
        return payload["message"]

    async def update_note_pinned(self, note_id: UUID, is_pinned: bool) -> NoteResponse:
        """PUT /update-note-pinned/{id}."""
        payload = await self._request(
            "PUT", f"/update-note-pinned/{note_id}", json={"isPinned": is_pinned}
        )
        return NoteResponse.model_validate(payload["note"])

    async def search_notes(self, query: str) -> List[NoteResponse]:
        """GET /search-notes?query=..."""
        return self._notes(
            await self._request("GET", "/search-notes", params={"query": query})
        )
