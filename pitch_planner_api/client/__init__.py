"""
Client side of the Pitch Planner API.

``forms`` converts between flat, string-typed form values and the
typed entity models; ``api_client`` sends those models to the REST
service.
"""
