"""
Pinnote Client: Board State
=============================

What:  The state a notes front end keeps between renders, and the actions
       that change it.
How:   Plain dataclasses for each concern, driven by NotesBoard through the
       NotesAPI wrapper.

State:
    notes      list mirroring the server, replaced wholesale on every load
    modal      ModalState(shown, mode, target), mode is "add" or "edit"
    toast      ToastState(shown, message, kind, shown_at)
    is_search  True while a search result is displayed; only picks the
               empty-state message

Invalidation rule:
    Every successful mutation (add, edit, delete, pin toggle) is followed by
    a full reload of the note list. Nothing is patched locally.

Failures:
    HTTP errors and transport errors are logged on `pinnote.client`. No toast
    is shown and the list keeps its previous contents.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import List, Optional

import httpx

from pinnote.client.api import ClientRequestError, NotesAPI
from pinnote.config import settings
from pinnote.schemas.note import NoteResponse

logger = logging.getLogger("pinnote.client")

EMPTY_MESSAGE = (
    "Start creating your first note! Click the 'Add' button to jot down your "
    "thoughts, ideas, and reminders. Let's get started!"
)
EMPTY_SEARCH_MESSAGE = "Oops! No notes found matching your search."


@dataclass
class ModalState:
    shown: bool = False
    mode: str = "add"
    target: Optional[NoteResponse] = None


@dataclass
class ToastState:
    shown: bool = False
    message: str = ""
    kind: str = "add"
    shown_at: Optional[float] = None


@dataclass
class NotesBoard:
    """
    Client-side controller for the notes list, modal and toast.

    Call load() once on mount. Action methods return True when the server
    accepted the change.
    """

    api: NotesAPI
    toast_duration: float = field(default_factory=lambda: settings.toast_duration)
    notes: List[NoteResponse] = field(default_factory=list)
    modal: ModalState = field(default_factory=ModalState)
    toast: ToastState = field(default_factory=ToastState)
    is_search: bool = False

    # ── Modal ─────────────────────────────────────────────────────────────

    def open_add(self) -> None:
        self.modal = ModalState(shown=True, mode="add", target=None)

    def open_edit(self, note: NoteResponse) -> None:
        self.modal = ModalState(shown=True, mode="edit", target=note)

    def close_modal(self) -> None:
        self.modal = ModalState()

    # ── Toast ─────────────────────────────────────────────────────────────

    def show_toast(self, message: str, kind: str = "add", now: Optional[float] = None) -> None:
        self.toast = ToastState(
            shown=True,
            message=message,
            kind=kind,
            shown_at=time.monotonic() if now is None else now,
        )

    def close_toast(self) -> None:
        self.toast = ToastState()

    def dismiss_expired(self, now: Optional[float] = None) -> bool:
        """Clear the toast once it has been visible for toast_duration seconds."""
        if not self.toast.shown or self.toast.shown_at is None:
            return False
        now = time.monotonic() if now is None else now
        if now - self.toast.shown_at >= self.toast_duration:
            self.close_toast()
            return True
        return False

    @property
    def empty_message(self) -> str:
        return EMPTY_SEARCH_MESSAGE if self.is_search else EMPTY_MESSAGE

    # ── Data ──────────────────────────────────────────────────────────────

    def _failed(self, action: str, exc: Exception) -> bool:
        if isinstance(exc, ClientRequestError):
            logger.warning("%s failed: %s", action, exc)
        else:
            logger.error("%s failed: %s", action, exc)
        return False

    async def load(self) -> bool:
        """Fetch the full list and replace the local copy."""
        try:
            self.notes = await self.api.get_all_notes()
            return True
        except (ClientRequestError, httpx.HTTPError) as e:
            return self._failed("load", e)

    async def _refresh(self) -> None:
        # Any accepted mutation invalidates the whole list
        await self.load()

    async def add_note(
        self,
        title: str,
        content: str,
        tags: Optional[List[str]] = None,
    ) -> bool:
        try:
            await self.api.add_note(title, content, tags=tags)
        except (ClientRequestError, httpx.HTTPError) as e:
            return self._failed("add_note", e)
        self.show_toast("Note Added Successfully", "add")
        self.close_modal()
        await self._refresh()
        return True

    async def edit_note(
        self,
        note: NoteResponse,
        title: Optional[str] = None,
        content: Optional[str] = None,
        tags: Optional[List[str]] = None,
    ) -> bool:
        try:
            await self.api.edit_note(note.id, title=title, content=content, tags=tags)
        except (ClientRequestError, httpx.HTTPError) as e:
            return self._failed("edit_note", e)
        self.show_toast("Note Updated Successfully", "edit")
        self.close_modal()
        await self._refresh()
        return True

    async def delete_note(self, note: NoteResponse) -> bool:
        try:
            await self.api.delete_note(note.id)
        except (ClientRequestError, httpx.HTTPError) as e:
            return self._failed("delete_note", e)
        self.show_toast("Note Deleted Successfully", "delete")
        await self._refresh()
        return True

    async def toggle_pin(self, note: NoteResponse) -> bool:
        try:
            await self.api.update_note_pinned(note.id, not note.is_pinned)
        except (ClientRequestError, httpx.HTTPError) as e:
            return self._failed("toggle_pin", e)
        self.show_toast("Note Updated Successfully", "edit")
        await self._refresh()
        return True

    async def search(self, query: str) -> bool:
        """Replace the displayed list with search results."""
        try:
            results = await self.api.search_notes(query)
        except (ClientRequestError, httpx.HTTPError) as e:
            return self._failed("search", e)
        self.is_search = True
        self.notes = results
        return True

    async def clear_search(self) -> bool:
        self.is_search = False
        return await self.load()
