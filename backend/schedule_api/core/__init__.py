"""Core Layer — error taxonomy and store contracts, no IO.

Invariants:
    - No module in core/ imports from api/, infrastructure/, or the MongoDB driver
"""
