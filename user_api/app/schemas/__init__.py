"""
Pydantic schema definitions for API payloads.

Schemas describe request and response bodies and double as the record
type handed back by the persistence layer.
"""
