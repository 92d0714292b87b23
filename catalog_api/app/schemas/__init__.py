"""
Pydantic schema definitions for API payloads.

Each resource defines its own request and response models.  Schemas
are separated from the domain models so the JSON representation
(camelCase field names) stays independent from persistence.
"""
