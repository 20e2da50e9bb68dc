"""Infrastructure Layer — database session management and logging.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Store failures leave this layer as StoreError, never as raw SQLAlchemy exceptions
"""
