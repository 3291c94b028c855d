"""Core Layer — pure validation logic, no IO, no async, no HTTP.

Invariants:
    - No module in core/ imports from api/ or infrastructure/
    - Rules, validators and outcomes are immutable and deterministic
"""
