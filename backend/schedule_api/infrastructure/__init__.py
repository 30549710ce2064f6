"""Infrastructure Layer — document store gateway and cross-cutting concerns.

Invariants:
    - Driver exceptions never escape this package unmapped
"""
