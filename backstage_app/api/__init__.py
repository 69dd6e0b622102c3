"""API Layer — FastAPI routes, middleware, dependencies, and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON, errors included

Design Decisions:
    - Thin routes: data and derivations live in core/, ambient reads in infrastructure/
"""
