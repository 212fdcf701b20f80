"""Core Layer: pure domain logic, no IO, no async, no framework.

Invariants:
    - No module in core/ imports from services/, api/, or infrastructure/
    - No module in core/ imports pydantic or schemas/; wire-format decoding lives in services/
    - All functions are pure and deterministic
"""
