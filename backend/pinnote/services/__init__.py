# Services package init
"""
Pinnote Backend: Services Layer
=================================

What:  Business logic layer sitting between routes (HTTP) and database (persistence).

Service Inventory:
    - NoteService: validation, existence checks and store access for the six
      note operations
"""
