"""
Pinnote Client
================

Python counterpart of the browser front end: NotesAPI speaks the HTTP
contract, NotesBoard keeps the list/modal/toast state and reloads the list
after every change.
"""

from pinnote.client.api import ClientRequestError, NotesAPI
from pinnote.client.board import ModalState, NotesBoard, ToastState

__all__ = ["ClientRequestError", "ModalState", "NotesAPI", "NotesBoard", "ToastState"]
