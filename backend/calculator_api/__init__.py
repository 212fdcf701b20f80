"""Calculator API Package: four-operation integer arithmetic over HTTP.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
