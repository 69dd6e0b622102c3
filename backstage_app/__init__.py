"""Backstage App — mock catalog REST service (users, services, health, status).

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
