"""
Pydantic schema definitions for API payloads.

Each entity defines its own family of models: ``Create`` (body of
POST, id expected to be absent), ``Update`` (body of PUT, full
replacement), ``Partial`` (body of PATCH and the typed value behind
client forms, every field optional) and ``Read`` (stored record).
"""
