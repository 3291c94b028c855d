"""Pydantic Schemas — payloads bound at the API boundary.

Invariants:
    - Payloads are immutable once bound
    - Schemas check presence and type only; content rules live in core/rule_sets.py
"""
