"""Server side of the Pitch Planner API: FastAPI app, schemas and services."""
