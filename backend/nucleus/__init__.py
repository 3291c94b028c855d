"""Nucleus — versioned HTTP API with declarative request validation.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
