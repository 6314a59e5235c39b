"""Infrastructure Layer — database session management, store implementation, logging.

Invariants:
    - Only layer allowed to import SQLAlchemy sessions directly
    - Errors from drivers are mapped to core DatabaseError
"""
