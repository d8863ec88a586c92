"""Services Layer — request handlers orchestrating core rules around persistence.

Invariants:
    - Handlers never raise; every outcome is a Response / PagedResponse envelope
    - Failures are logged internally; callers only see a fixed message
"""
