"""
Service layer.

Each service is the repository for one entity: it owns the SQL for
that entity's table and returns Pydantic ``Read`` models.  The API
handlers decide what HTTP response a missing record turns into.
"""
