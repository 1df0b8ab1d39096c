"""Pydantic Schemas — response shapes for API endpoints.

Invariants:
    - Schemas describe what the client sees, never the full upstream payload

Design Decisions:
    - Upstream payloads stay plain dicts until projected (ADR: no full store schema)
"""
