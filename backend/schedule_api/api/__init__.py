"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every non-list response uses the {success, message, data?, error?} envelope
"""
