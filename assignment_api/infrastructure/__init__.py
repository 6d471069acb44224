"""Infrastructure Layer — process-level concerns (logging setup).

Invariants:
    - Nothing here is imported by core/
"""
