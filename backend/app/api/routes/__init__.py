"""Route Modules — one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter
    - Routes never contain reshaping logic (delegate to core/reshape)

Design Decisions:
    - Explicit registration in main.py over auto-discovery
"""
