"""Pydantic Schemas — response contracts for the exercise tracker API.

Invariants:
    - Identifiers serialize as "_id" (serialization_alias), the public field name
    - Schemas are API contracts; models/ holds persistence
"""
