"""
Endpoint subpackage.

Each module defines an APIRouter for one entity (or for accounts).
The routers declare their full paths and are aggregated in
``pitch_planner_api.app.api.router``.
"""
