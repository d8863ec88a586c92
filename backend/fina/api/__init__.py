"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return the {data, code, message} envelope as JSON

Design Decisions:
    - Thin routes delegate to handlers in services/
"""
