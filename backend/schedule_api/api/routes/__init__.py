"""Route Modules — one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter
    - Routes never talk to the MongoDB driver directly (ScheduleStore only)
"""
