"""
Pydantic schema definitions for API payloads.

Schemas are separated from the persistence layer so that the API
representation (camelCase JSON) is decoupled from table columns.
"""
