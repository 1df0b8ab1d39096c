"""API Layer — FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Success bodies are JSON; pass-through failures have empty bodies

Design Decisions:
    - Thin routes: fetch via StoreClient, narrow via core/reshape (ADR: impureim sandwich)
"""
