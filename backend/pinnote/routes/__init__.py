# Routes package init
"""
Pinnote Backend: API Routes Package
=====================================

Route Inventory:
    - notes.py:   the notes CRUD contract (/, /add-note, /edit-note/{id},
                  /get-all-notes, /delete-note/{id}, /update-note-pinned/{id},
                  /search-notes)
    - health.py:  GET /health (service health check)

Routes stay thin: they extract request data, call NoteService, and wrap the
result in the response envelope. Rules live in the service layer.
"""
