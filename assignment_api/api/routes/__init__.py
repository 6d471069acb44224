"""Route Modules — one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter
    - Routes never contain domain logic (delegate to core/)
"""
