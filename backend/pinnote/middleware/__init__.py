# Middleware package init
"""
Pinnote Backend: Middleware Package
=====================================

Middleware Chain (request direction):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Request ID first, so the access log and error bodies can use it
    2. Logging measures everything below it
    3. GZip and CORS come from FastAPI/Starlette

Responses travel back through the same chain in reverse.
"""
