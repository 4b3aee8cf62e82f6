"""
Pitch Planner API.

``app`` holds the REST service; ``client`` holds the form adapters
and the HTTP client that consume it.
"""
