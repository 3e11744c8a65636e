"""Infrastructure Layer — database session management and structured logging.

Invariants:
    - Infrastructure never imports from core/ domain logic (errors excepted)
    - All SQLAlchemy failures are mapped to DatabaseError before leaving this layer
"""
