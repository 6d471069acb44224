"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - API endpoints return structured JSON responses; GET / returns the HTML page

Design Decisions:
    - Thin routes delegate to the core Evaluator
"""
