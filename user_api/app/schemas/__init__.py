"""
Pydantic schema definitions for API payloads.

Schemas are separated from the entity in ``models`` to decouple the
API representation from persistence.
"""
