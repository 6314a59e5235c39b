"""Book Catalog Application Package — record management for book entries.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
