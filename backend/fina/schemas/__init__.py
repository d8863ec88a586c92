"""Pydantic Schemas — request/response validation for handlers and API endpoints.

Invariants:
    - Request models validate at system boundary (field-level constraints)
    - Every handler returns a Response / PagedResponse envelope

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
    - HTTP payloads never carry user_id or id; routes inject them
"""
