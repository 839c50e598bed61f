"""Infrastructure Layer — MongoDB client, repositories and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from api/
    - All driver calls wrapped with error mapping (store_errors)
"""
