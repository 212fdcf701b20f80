"""API Layer: FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.create_app() (no auto-discovery)
    - Every non-health response is JSON, errors included
"""
