"""Configuration, database access, security and HTTP error helpers."""
