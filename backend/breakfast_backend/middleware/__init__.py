# Middleware package init
"""
Healthy Breakfast Backend — Middleware Package
==============================================

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    1. Request ID first so every later log line can carry it
    2. Logging measures everything below it, CORS included
    3. CORS is FastAPI's CORSMiddleware (answers preflight requests)
"""
