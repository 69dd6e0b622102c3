"""Infrastructure Layer — runtime introspection, randomness, and logging setup.

Invariants:
    - Infrastructure never imports from api/
    - Every ambient read (clock aside) sits behind an injectable capability
"""
