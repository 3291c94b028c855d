"""API Layer — FastAPI routes, filters, versioning and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Routes never contain validation logic (delegated to the validation filter)
"""
