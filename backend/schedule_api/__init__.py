"""Gym Schedule API Package — CRUD backend for gym class schedules.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
