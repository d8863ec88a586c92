"""Infrastructure Layer — database access and cross-cutting concerns.

Invariants:
    - Repositories implement the Protocols in core/repository_protocols.py
    - SQLAlchemy exceptions escaping a request are mapped to DatabaseError

Design Decisions:
    - Thin wrappers over the async ORM session, one repository per entity
"""
