"""Services Layer — the imperative shell around core logic.

Invariants:
    - Services talk to persistence only through the UserRepository protocol
    - Services return plain dicts; routes shape them with response schemas

Design Decisions:
    - Pure parsing/shaping in core, IO here (impureim sandwich)
"""
