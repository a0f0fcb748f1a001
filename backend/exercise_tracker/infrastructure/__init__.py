"""Infrastructure Layer — database access and cross-cutting concerns.

Invariants:
    - Infrastructure implements core protocols; it never holds domain rules
    - All database failures surface as DatabaseError

Design Decisions:
    - SQLAlchemy implementation behind the UserRepository protocol
"""
