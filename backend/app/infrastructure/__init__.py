"""Infrastructure Layer — store API client and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from core/ reshaping logic
    - All outbound calls wrapped with timeout and error mapping

Design Decisions:
    - Wrapper over raw httpx client: routes never touch httpx exceptions
"""
